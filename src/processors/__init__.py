from .payslip_generator import PayslipGenerator


__all__ = [
    'PayslipGenerator'
]

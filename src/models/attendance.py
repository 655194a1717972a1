from dataclasses import dataclass
from datetime import date, time

@dataclass(frozen=True)
class AttendanceRecord:
    """One clock-in/clock-out entry from the attendance store"""
    employee_id: int
    date: date
    time_in: time
    time_out: time

    def hours_worked(self) -> float:
        """Fractional hours between time-in and time-out.

        Records are trusted as-is: a time-out earlier than the time-in
        yields a negative value. Cross-midnight shifts are not handled.
        """
        seconds_in = self.time_in.hour * 3600 + self.time_in.minute * 60 + self.time_in.second
        seconds_out = self.time_out.hour * 3600 + self.time_out.minute * 60 + self.time_out.second
        return (seconds_out - seconds_in) / 3600.0

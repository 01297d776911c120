from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Person:
    """A person identified by an id and a social security number.

    The first digit of ``security_number`` encodes the sex and the next two
    digits the department. Digits are read from the decimal representation,
    so a number whose leading zero was lost when stored as an integer yields
    shifted values.
    """

    id: int = 0
    security_number: int = 0
    last_name: str = ""
    first_name: str = ""

    def is_male(self) -> bool:
        """Return True if the security number starts with ``1``."""
        return str(self.security_number)[:1] == "1"

    def department_number(self) -> int:
        """Return the department code held by the 2nd and 3rd digits."""
        digits = str(self.security_number)
        if len(digits) < 3:
            raise ValueError(
                f"security_number {digits!r} is too short to hold a department"
            )
        return int(digits[1:3])

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name} : {self.security_number}"

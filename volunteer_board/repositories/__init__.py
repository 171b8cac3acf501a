# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Repository package: re-exports RegistrationRepository."""
from volunteer_board.repositories.registration_repository import RegistrationRepository

__all__ = ["RegistrationRepository"]

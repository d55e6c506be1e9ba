"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.clubverse.app.command import (
    create_reservation_use_case,
    login_use_case,
    register_user_use_case,
)
from src.service.clubverse.driving_adapter.http_controller import (
    reservation_controller,
    user_controller,
)
from src.service.clubverse.driving_adapter.http_controller.auth import current_user


WIRE_MODULES: list[ModuleType] = [
    register_user_use_case,
    login_use_case,
    create_reservation_use_case,
    current_user,
    user_controller,
    reservation_controller,
]

from .descriptors import CommandDescriptor
from .environment import DriverProfile, detect_driver_profile
from .tables import CommandTable
from .vocabulary import check_table_compatibility, compose_tables, select_command_vocabulary

__all__ = [
    "CommandDescriptor",
    "CommandTable",
    "DriverProfile",
    "check_table_compatibility",
    "compose_tables",
    "detect_driver_profile",
    "select_command_vocabulary",
]

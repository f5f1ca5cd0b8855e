from simpler_command.interfaces.command_interface import ICommand
from simpler_command.interfaces.error_collection_interface import (
    IErrorCollection,
    IErrorSource,
    errors_to_dict,
    iter_error_pairs,
)

__all__ = ["ICommand", "IErrorCollection", "IErrorSource", "errors_to_dict", "iter_error_pairs"]

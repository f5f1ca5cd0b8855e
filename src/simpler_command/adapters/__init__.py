from simpler_command.adapters.pydantic_errors import PydanticErrorSource

__all__ = ["PydanticErrorSource"]

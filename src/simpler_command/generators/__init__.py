from simpler_command.generators.command_generator import (
    CommandScaffold,
    GeneratedFile,
    generate_command,
    render_command,
)

__all__ = ["CommandScaffold", "GeneratedFile", "generate_command", "render_command"]

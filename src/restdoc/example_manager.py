"""Example manager for loading command examples from YAML files.

Examples kept outside the command's help text live in one YAML file per
command, named after the hyphen-joined command path:

    # docs/examples/app-storage-mount.yaml
    examples:
      - title: Mount a share
        description: Mounts the default share read-only
        command: app storage mount data --read-only
        output: |
          Mounted data at /mnt/data

Philosophy:
- Simple YAML loading
- Standard library + PyYAML
- Missing or unreadable files mean "no examples", never an error
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)


@dataclass
class CommandExample:
    """Represents a documented usage example.

    Attributes:
        title: Brief title describing the example
        description: Detailed explanation of what it demonstrates
        command: Full command string with arguments
        output: Expected output (optional)
    """

    title: str
    description: str
    command: str
    output: str | None = None


class ExampleManager:
    """Loads command examples from a directory of YAML files."""

    def __init__(self, examples_dir: str | Path):
        """Initialize example manager.

        Args:
            examples_dir: Directory containing example YAML files
        """
        self.examples_dir = Path(examples_dir)

    def _sanitize_command_name(self, command_name: str) -> str:
        """Sanitize a file stem to prevent path traversal.

        Raises:
            ValueError: If the name contains invalid characters

        Example:
            >>> manager = ExampleManager("docs/examples/")
            >>> manager._sanitize_command_name("app-mount")
            'app-mount'
        """
        # Only allow alphanumeric, dash, and underscore
        if not re.match(r"^[a-zA-Z0-9_-]+$", command_name):
            raise ValueError(f"Invalid command name: {command_name}")
        return command_name

    def load_examples(self, command_path: str) -> list[CommandExample]:
        """Load examples for a command.

        Args:
            command_path: Full command path (e.g., "app storage mount")

        Returns:
            List of CommandExample objects, empty when none are defined
        """
        try:
            safe_name = self._sanitize_command_name(command_path.replace(" ", "-"))
        except ValueError as e:
            logger.warning("%s", e)
            return []

        yaml_file = self.examples_dir / f"{safe_name}.yaml"

        if not yaml_file.exists():
            # Try with underscores instead of hyphens
            yaml_file = self.examples_dir / f"{safe_name.replace('-', '_')}.yaml"

        if not yaml_file.exists():
            return []

        return self._load_from_file(yaml_file)

    def load_example_text(self, command_path: str) -> str:
        """Load a command's examples already formatted as example text."""
        return format_examples(self.load_examples(command_path))

    def _load_from_file(self, yaml_file: Path) -> list[CommandExample]:
        try:
            with open(yaml_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Failed to load examples from '%s': %s", yaml_file, e)
            return []

        if not isinstance(data, dict) or not data.get("examples"):
            return []

        examples = []
        for ex_data in data["examples"]:
            if not isinstance(ex_data, dict) or not ex_data.get("command"):
                logger.warning("Skipping malformed example in '%s'", yaml_file)
                continue
            examples.append(
                CommandExample(
                    title=ex_data.get("title", "") or "",
                    description=ex_data.get("description", "") or "",
                    command=str(ex_data["command"]).strip(),
                    output=ex_data.get("output"),
                )
            )

        logger.debug("Loaded %d examples from %s", len(examples), yaml_file)
        return examples


def format_examples(examples: list[CommandExample]) -> str:
    """Render examples as a plain example block.

    Titles and descriptions become ``#`` comment lines above the command;
    expected output follows the command. Examples are separated by a blank line.
    """
    blocks = []
    for example in examples:
        lines = []
        if example.title:
            lines.append(f"# {example.title}")
        lines.extend(f"# {line}" for line in example.description.strip().splitlines())
        lines.append(example.command)
        if example.output:
            lines.extend(example.output.rstrip().splitlines())
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


__all__ = ["CommandExample", "ExampleManager", "format_examples"]

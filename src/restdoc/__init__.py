"""restdoc - reStructuredText reference pages for Click command trees

Philosophy:
- One page per command, named after its command path
- Read-only walk over the command tree
- Pluggable link and prepend hooks

Walks a Click application's command hierarchy and writes one reference page
per command with usage, option tables, examples and See Also links.
"""

from restdoc.extractor import extract_tree
from restdoc.models import CommandNode, FlagInfo
from restdoc.renderer import default_link_handler, gen_custom, render_page
from restdoc.walker import empty_prepender, gen_tree, gen_tree_custom

__version__ = "0.1.0"
__all__ = [
    "CommandNode",
    "FlagInfo",
    "__version__",
    "default_link_handler",
    "empty_prepender",
    "extract_tree",
    "gen_custom",
    "gen_tree",
    "gen_tree_custom",
    "render_page",
]

from templatesite.models.page import CONTENT_BLOCKS
from .section import assert_sections
from .exceptions import InvariantViolation

def assert_page_content(content, sections=None):
    if not isinstance(content, dict):
        raise InvariantViolation("Page content must be an object.")

    unknown = sorted(set(content) - set(CONTENT_BLOCKS))
    if unknown:
        raise InvariantViolation(f"Unknown content blocks: {unknown}")

    for name, block in content.items():
        # Blocks are opaque, but must be structured when present
        if block is not None and not isinstance(block, (dict, list)):
            raise InvariantViolation(
                f"Content block '{name}' must be an object or a list."
            )

    if sections is not None:
        assert_sections(sections)

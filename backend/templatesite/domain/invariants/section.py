from .exceptions import InvariantViolation

def assert_sections(sections):
    if not isinstance(sections, list):
        raise InvariantViolation("Sections must be a list.")

    for section in sections:
        if not isinstance(section, dict):
            raise InvariantViolation("Each section must be an object.")
        if not section.get("type"):
            raise InvariantViolation("Section type is required.")
        if section.get("id") is not None and not isinstance(section["id"], str):
            raise InvariantViolation("Section id must be a string.")

"""
Contract errors raised by the section parsers.

Extraction misses are never errors: a field that cannot be found is left as "".
Only caller mistakes (an unknown section or a malformed configuration) raise.
"""


class SectionParserError(ValueError):
    """Base class for caller errors."""


class UnknownSectionError(SectionParserError):
    def __init__(self, section_type):
        self.section_type = section_type
        super().__init__(f"Unknown section type: {getattr(section_type, 'value', section_type)}")


class ParserConfigError(SectionParserError):
    """A custom configuration does not have the shape the parser expects."""

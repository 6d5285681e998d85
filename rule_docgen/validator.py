from pathlib import Path
from typing import Sequence

from rule_docgen.constants import OPTIONS_SECTION_HEADERS
from rule_docgen.markdown import find_section_header
from rule_docgen.models import SectionViolation
from rule_docgen.rules.models import RuleDetails
from rule_docgen.rules.options import get_all_named_options, has_options


def mentions(contents: str, content: str) -> bool:
    # Option names often appear inside quoted code samples.
    return (
        content in contents
        or content.replace('"', '\\"') in contents
        or content.replace("'", "\\'") in contents
    )


class SectionValidator:
    def __init__(
        self,
        include: Sequence[str] = (),
        exclude: Sequence[str] = (),
        check_options: bool = True,
    ) -> None:
        self.include = tuple(include)
        self.exclude = tuple(exclude)
        self.check_options = check_options

    def validate(self, details: RuleDetails, contents: str, path: Path) -> list[SectionViolation]:
        violations: list[SectionViolation] = []

        def _report(message: str) -> None:
            violations.append(SectionViolation(rule=details.name, path=path, message=message))

        for section in self.include:
            if not find_section_header(contents, section):
                _report(f"`{details.name}` rule doc should have included the header: {section}")

        for section in self.exclude:
            if find_section_header(contents, section):
                _report(f"`{details.name}` rule doc should not have included the header: {section}")

        if self.check_options and has_options(details.schema):
            if not any(find_section_header(contents, header) for header in OPTIONS_SECTION_HEADERS):
                _report(
                    f"`{details.name}` rule doc should have included one of these headers: "
                    f"{', '.join(OPTIONS_SECTION_HEADERS)}"
                )
            for option in get_all_named_options(details.schema):
                if not mentions(contents, option):
                    _report(f"`{details.name}` rule doc should have included: {option}")

        return violations

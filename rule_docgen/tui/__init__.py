from rule_docgen.tui.renderers import DocsConsoleUI

__all__ = ["DocsConsoleUI"]

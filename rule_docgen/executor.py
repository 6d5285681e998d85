from typing import Optional, Protocol

from rule_docgen.models import ActionKind, ActionStatus, DocAction, DocsPlan
from rule_docgen.repositories.documents import DocumentRepository


class ActionHandler(Protocol):
    def handle(
        self, action: DocAction, documents: DocumentRepository
    ) -> tuple[bool, Optional[str]]: ...


class WriteTextHandler:
    def handle(
        self, action: DocAction, documents: DocumentRepository
    ) -> tuple[bool, Optional[str]]:
        if action.status == ActionStatus.NOOP:
            return False, None
        if not isinstance(action.payload, str):
            return False, f"Missing text payload for write action: {action.path}"

        documents.write(action.path, action.payload)
        return True, None


class DocsExecutor:
    def __init__(self, documents: DocumentRepository) -> None:
        self.documents = documents
        self.handlers: dict[ActionKind, ActionHandler] = {
            ActionKind.WRITE_TEXT: WriteTextHandler(),
        }

    def execute(self, plan: DocsPlan) -> tuple[int, int, list[str]]:
        applied = 0
        failed = 0
        failures: list[str] = []

        for action in plan.actions:
            try:
                handler = self.handlers.get(action.kind)
                if handler is None:
                    failed += 1
                    failures.append(f"Unknown action kind: {action.kind.value}")
                    continue

                changed, failure = handler.handle(action, self.documents)
                if failure is not None:
                    failed += 1
                    failures.append(failure)
                    continue
                if changed:
                    applied += 1
            except OSError as exc:
                failed += 1
                failures.append(f"{action.kind.value} failed for {action.path}: {exc}")

        return applied, failed, failures

"""Load a plugin's rules and configs from a manifest or a Python object."""

from __future__ import annotations

import importlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Any, Mapping, Optional

from rule_docgen.constants import PLUGIN_MANIFEST_FILENAMES
from rule_docgen.errors import PluginLoadError
from rule_docgen.rules.models import Plugin
from rule_docgen.rules.normalizer import read_field
from rule_docgen.schemas import PLUGIN_MANIFEST_SCHEMA
from rule_docgen.utils import read_structured, validate_payload

_MANIFEST_SUFFIXES = (".json", ".yaml", ".yml")


class PluginRepository:
    def __init__(self, root: Path, source: Optional[str] = None) -> None:
        self.root = root
        self.source = source

    def load(self) -> Plugin:
        if self.source is None:
            manifest = self.find_manifest()
            if manifest is None:
                raise PluginLoadError(
                    str(self.root),
                    f"no {', '.join(PLUGIN_MANIFEST_FILENAMES)} found and no --plugin given",
                )
            return self.load_manifest(manifest)

        candidate = Path(self.source)
        if not candidate.is_absolute():
            candidate = self.root / candidate
        if candidate.suffix in _MANIFEST_SUFFIXES:
            if not candidate.is_file():
                raise PluginLoadError(self.source, "manifest file does not exist")
            return self.load_manifest(candidate)
        if candidate.suffix == ".py":
            return self._from_object(self._import_file(candidate), default_name=candidate.stem)
        return self._load_object(self.source)

    def find_manifest(self) -> Optional[Path]:
        for filename in PLUGIN_MANIFEST_FILENAMES:
            path = self.root / filename
            if path.is_file():
                return path
        return None

    def load_manifest(self, path: Path) -> Plugin:
        payload = read_structured(path)
        validate_payload(path, payload, PLUGIN_MANIFEST_SCHEMA)
        return Plugin(
            name=str(payload.get("name") or self.root.resolve().name),
            rules=payload.get("rules") or {},
            configs=payload.get("configs") or {},
        )

    def _load_object(self, spec: str) -> Plugin:
        module_name, _, attribute = spec.partition(":")
        root = str(self.root.resolve())
        added = root not in sys.path
        if added:
            sys.path.insert(0, root)
        try:
            module = importlib.import_module(module_name)
        except ImportError as exc:
            raise PluginLoadError(spec, str(exc)) from exc
        finally:
            if added:
                sys.path.remove(root)

        target: Any = module
        if attribute:
            for part in attribute.split("."):
                if not hasattr(target, part):
                    raise PluginLoadError(spec, f"attribute `{part}` not found")
                target = getattr(target, part)
        return self._from_object(target, default_name=module_name.split(".")[0])

    def _import_file(self, path: Path) -> ModuleType:
        if not path.is_file():
            raise PluginLoadError(str(path), "plugin module does not exist")
        spec = importlib.util.spec_from_file_location(f"_rule_docgen_plugin_{path.stem}", path)
        if spec is None or spec.loader is None:
            raise PluginLoadError(str(path), "not an importable module")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise PluginLoadError(str(path), f"{type(exc).__name__}: {exc}") from exc
        return module

    @staticmethod
    def _from_object(target: Any, default_name: str) -> Plugin:
        rules = read_field(target, "rules")
        if not isinstance(rules, Mapping):
            raise PluginLoadError(default_name, "could not find exported `rules` mapping")
        configs = read_field(target, "configs") or {}
        if not isinstance(configs, Mapping):
            raise PluginLoadError(default_name, "`configs` must be a mapping")
        name = read_field(target, "name") or read_field(read_field(target, "meta"), "name")
        return Plugin(name=str(name or default_name), rules=rules, configs=configs)

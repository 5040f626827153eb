"""Utilities for declaratively registering application modules.

Each blueprint-backed module is described with metadata so that discovery
and registration stay in one place. A module package may expose a
``setup_module(app)`` hook which runs after its blueprint is registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from flask import Blueprint, Flask
from werkzeug.utils import import_string


@dataclass(frozen=True)
class ModuleDefinition:
    """Describe how a blueprint-backed module is registered with the app."""

    import_path: str
    attribute: str
    url_prefix: Optional[str] = None
    version: str = "1.0"

    def load_module(self):
        return import_string(self.import_path)

    def load_blueprint(self) -> Blueprint:
        """Import and return the blueprint described by this definition."""

        module = self.load_module()
        blueprint = getattr(module, self.attribute, None)
        if not isinstance(blueprint, Blueprint):
            raise TypeError(
                "Expected attribute '%s' in '%s' to be a Flask Blueprint, got %r instead"
                % (self.attribute, self.import_path, type(blueprint))
            )
        return blueprint


def register_modules(app: Flask, modules: Sequence[ModuleDefinition]) -> None:
    """Register all modules in the provided iterable with the Flask app."""

    for module in modules:
        blueprint = module.load_blueprint()
        app.register_blueprint(blueprint, url_prefix=module.url_prefix)

        setup_module = getattr(module.load_module(), 'setup_module', None)
        if callable(setup_module):
            setup_module(app)

        app.logger.debug(
            "Registered module %s (version %s) at prefix %s",
            module.import_path,
            module.version,
            module.url_prefix or "<root>",
        )


def register_default_modules(app: Flask) -> None:
    """Convenience helper that registers the built-in VocabMaster modules."""

    register_modules(app, DEFAULT_MODULES)


DEFAULT_MODULES: Iterable[ModuleDefinition] = (
    ModuleDefinition("vocabmaster_app.modules.auth", "auth_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.collections", "collections_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.vocabulary", "vocabulary_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.progress", "progress_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.study", "study_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.dashboard", "dashboard_bp", url_prefix="/api", version="1.0"),
    ModuleDefinition("vocabmaster_app.modules.audio", "audio_bp", url_prefix="/api", version="1.0"),
)

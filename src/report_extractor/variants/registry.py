"""Registry of report variants.

Usage::

    from report_extractor.variants import default_registry

    registry = default_registry()
    tutoring = registry.get("tutoring")
    print(tutoring.cardinality)   # {"strengths": 3, "challenges": 4}
"""

from __future__ import annotations

import logging
from pathlib import Path

from report_extractor.exceptions import VariantNotFound
from report_extractor.variants.builtin import BUILTIN_VARIANTS
from report_extractor.variants.file_backend import FileVariantBackend
from report_extractor.variants.models import ReportVariant

log = logging.getLogger(__name__)


class VariantRegistry:
    """Name-keyed collection of ``ReportVariant`` definitions.

    Owned by whoever builds the extractor; there is no process-wide
    instance.
    """

    def __init__(self) -> None:
        self._variants: dict[str, ReportVariant] = {}

    def register(self, variant: ReportVariant) -> None:
        if variant.name in self._variants:
            log.warning("Variant %r already registered, overwriting", variant.name)
        self._variants[variant.name] = variant
        log.debug("Registered variant: %s", variant.name)

    def get(self, name: str) -> ReportVariant:
        """Get a variant by name.

        Raises:
            VariantNotFound: If the variant is not registered.
        """
        if name not in self._variants:
            raise VariantNotFound(name, sorted(self._variants))
        return self._variants[name]

    def has(self, name: str) -> bool:
        return name in self._variants

    def list_variants(self) -> list[ReportVariant]:
        """Return all registered variants, sorted by name."""
        return sorted(self._variants.values(), key=lambda v: v.name)

    def load_file(self, path: Path) -> int:
        """Register every variant defined in a YAML/JSON file; returns the count."""
        variants = FileVariantBackend(path).list_variants()
        for variant in variants:
            self.register(variant)
        return len(variants)


def default_registry(extra_path: Path | None = None) -> VariantRegistry:
    """A fresh registry holding the built-in variants plus any from *extra_path*."""
    registry = VariantRegistry()
    for variant in BUILTIN_VARIANTS:
        registry.register(variant)
    if extra_path is not None:
        registry.load_file(extra_path)
    return registry

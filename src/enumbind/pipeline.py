"""
Generation pipeline.

Drives one enum through

    UNVALIDATED -> VALIDATED -> RENDERING -> RENDERED -> EMITTED

with FAILED reachable from UNVALIDATED (validation error), RENDERING
(render error) and RENDERED (write error). States are never revisited, and
nothing reaches the destination unless rendering completed.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any

from .core.config import EnumBindConfig, TargetLanguage
from .core.errors import EnumBindError
from .core.models import EnumSpec
from .emitter import Emitter
from .generators import EnumGenerator, create_generator
from .targets import Target, get_target

logger = logging.getLogger(__name__)


class GenerationState(StrEnum):
    """States of a single generation run."""

    UNVALIDATED = "unvalidated"
    VALIDATED = "validated"
    RENDERING = "rendering"
    RENDERED = "rendered"
    EMITTED = "emitted"
    FAILED = "failed"


_TRANSITIONS: dict[GenerationState, frozenset[GenerationState]] = {
    GenerationState.UNVALIDATED: frozenset({GenerationState.VALIDATED, GenerationState.FAILED}),
    GenerationState.VALIDATED: frozenset({GenerationState.RENDERING}),
    GenerationState.RENDERING: frozenset({GenerationState.RENDERED, GenerationState.FAILED}),
    GenerationState.RENDERED: frozenset({GenerationState.EMITTED, GenerationState.FAILED}),
    GenerationState.EMITTED: frozenset(),
    GenerationState.FAILED: frozenset(),
}


@dataclass
class GenerationResult:
    """
    Outcome of one generation run.

    Attributes:
        enum_name: Name of the enum (or the record's name if it never validated)
        state: Final state (EMITTED or FAILED)
        destination: Output path, once known
        error: The failure, if any
        history: States visited, in order
    """

    enum_name: str
    state: GenerationState
    destination: Path | None = None
    error: EnumBindError | None = None
    history: list[GenerationState] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Whether the unit was emitted."""
        return self.state == GenerationState.EMITTED


class GenerationRun:
    """
    One invocation of the generator for one enum.

    Args:
        source: Raw input record or an already constructed EnumSpec
        destination: Explicit output path
        output_root: Root to lay the unit out under when no destination is given
        target: Target language rules
        config: Generator configuration
        license_text: License header text, if any
        emitter: Emitter used for reading existing output and writing
    """

    def __init__(
        self,
        source: EnumSpec | dict[str, Any],
        *,
        destination: Path | None = None,
        output_root: Path | None = None,
        target: Target,
        config: EnumBindConfig,
        license_text: str | None = None,
        emitter: Emitter | None = None,
    ):
        if destination is None and output_root is None:
            raise ValueError("either destination or output_root is required")
        self.source = source
        self.destination = destination
        self.output_root = output_root
        self.target = target
        self.config = config
        self.license_text = license_text
        self.emitter = emitter or Emitter()
        self.spec: EnumSpec | None = None
        self.text: str | None = None
        self.failure: EnumBindError | None = None
        self.history = [GenerationState.UNVALIDATED]

    @property
    def state(self) -> GenerationState:
        return self.history[-1]

    @property
    def enum_name(self) -> str:
        if self.spec is not None:
            return self.spec.name
        if isinstance(self.source, dict):
            return str(self.source.get("name") or "<unnamed>")
        return self.source.name

    def _advance(self, new_state: GenerationState) -> None:
        if new_state not in _TRANSITIONS[self.state]:
            raise RuntimeError(
                f"{self.enum_name}: illegal transition {self.state.value} -> {new_state.value}"
            )
        logger.debug("%s: %s -> %s", self.enum_name, self.state.value, new_state.value)
        self.history.append(new_state)

    def _generator(self) -> EnumGenerator:
        assert self.spec is not None
        return create_generator(
            self.spec,
            self.target,
            lookup_threshold=self.config.lookup_threshold,
            license_text=self.license_text,
        )

    def validate(self) -> EnumSpec:
        """UNVALIDATED -> VALIDATED."""
        if isinstance(self.source, EnumSpec):
            spec = self.source
        else:
            spec = EnumSpec.from_record(self.source)
        self.spec = spec
        self._generator().validate()
        for native_name in spec.ignored_constants():
            logger.warning("%s: ignoring constant %s", spec.name, native_name)
        if self.destination is None:
            assert self.output_root is not None
            self.destination = self.target.output_path(self.output_root, spec)
        self._advance(GenerationState.VALIDATED)
        return spec

    def render(self) -> str:
        """VALIDATED -> RENDERING -> RENDERED. Rendering happens fully in memory."""
        self._advance(GenerationState.RENDERING)
        assert self.destination is not None
        existing = None
        if self.config.merge_existing and self.target.supports_merge:
            existing = self.emitter.read_existing(self.destination, self.enum_name)
        self.text = self._generator().render(existing)
        self._advance(GenerationState.RENDERED)
        return self.text

    def emit(self) -> Path:
        """RENDERED -> EMITTED."""
        assert self.destination is not None and self.text is not None
        path = self.emitter.emit(self.destination, self.text, self.enum_name)
        self._advance(GenerationState.EMITTED)
        return path

    def run(self) -> GenerationResult:
        """
        Run all steps.

        Raises:
            EnumBindError: On validation, render or emit failure, after
                moving the run to FAILED
        """
        try:
            self.validate()
            self.render()
            self.emit()
        except Exception as e:
            if isinstance(e, EnumBindError):
                self.failure = e
            self._advance(GenerationState.FAILED)
            logger.debug("%s: failed: %s", self.enum_name, e)
            raise
        return self.result()

    def result(self) -> GenerationResult:
        return GenerationResult(
            enum_name=self.enum_name,
            state=self.state,
            destination=self.destination,
            error=self.failure,
            history=list(self.history),
        )


def generate_enum(
    source: EnumSpec | dict[str, Any],
    destination: Path,
    *,
    config: EnumBindConfig | None = None,
    language: TargetLanguage | str | None = None,
) -> GenerationResult:
    """
    Generate one enum to an explicit destination.

    Raises:
        EnumBindError: If the spec is invalid or cannot be rendered/written
    """
    config = config or EnumBindConfig()
    run = GenerationRun(
        source,
        destination=destination,
        target=get_target(language or config.language),
        config=config,
        license_text=config.license_header(),
    )
    return run.run()


def generate_all(
    sources: Sequence[EnumSpec | dict[str, Any]],
    output_root: Path,
    *,
    config: EnumBindConfig | None = None,
    language: TargetLanguage | str | None = None,
    max_workers: int = 4,
) -> list[GenerationResult]:
    """
    Generate many enums concurrently under ``output_root``.

    Runs share no mutable state; each publishes its own destination
    atomically. A failing enum does not stop the others.

    Returns:
        One result per source, in input order
    """
    config = config or EnumBindConfig()
    target = get_target(language or config.language)
    license_text = config.license_header()

    runs = [
        GenerationRun(
            source,
            output_root=output_root,
            target=target,
            config=config,
            license_text=license_text,
        )
        for source in sources
    ]

    def process(run: GenerationRun) -> GenerationResult:
        try:
            return run.run()
        except EnumBindError:
            return run.result()

    results: dict[int, GenerationResult] = {}
    workers = max(1, min(max_workers, len(runs)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = {executor.submit(process, run): index for index, run in enumerate(runs)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()

    failed = sum(1 for r in results.values() if not r.success)
    logger.info("Generated %d enum(s), %d failed", len(runs) - failed, failed)
    return [results[index] for index in range(len(runs))]

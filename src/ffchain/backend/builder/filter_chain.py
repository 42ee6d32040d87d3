"""Filter graph accumulator.

Collects filter nodes in insertion order and renders them either as a simple
``-vf`` chain or as a labeled ``-filter_complex`` graph.

Complex nodes come in two shapes:

* *main* nodes declare no outputs. They consume the current main video label
  (``[0:v]`` at first) plus any declared inputs, and their allocated output
  label becomes the new main label.
* *branch* nodes declare their own outputs, e.g. to pre-process an overlay
  source. They render only their declared labels and leave the main label
  alone, unless added with ``main_output`` (a concat joining the inputs), in
  which case their first output becomes the main label.

Labels are allocated from one counter when a node is added, so rendering
never changes state.
"""

from __future__ import annotations

from dataclasses import dataclass

from ffchain.models import FilterKind
from ffchain.tools.args import MAIN_VIDEO

SIMPLE_LABEL_PREFIX = "temp"
COMPLEX_LABEL_PREFIX = "out"


@dataclass(frozen=True, slots=True)
class FilterNode:
    """One filter in the chain."""

    text: str
    kind: FilterKind
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    branch: bool = False
    main_output: bool = False

    @property
    def feeds_main(self) -> bool:
        """Whether later main nodes read this node's first output."""
        return self.kind is FilterKind.COMPLEX and (self.main_output or not self.branch)

    def render(self, main_label: str) -> str:
        """Return this node as a filter graph fragment."""
        inputs = self.inputs if self.branch else (main_label, *self.inputs)
        return "".join(inputs) + self.text + "".join(self.outputs)


class FilterChain:
    """Ordered filter nodes plus a monotonically increasing label counter."""

    def __init__(self) -> None:
        self._nodes: list[FilterNode] = []
        self._next_label = 0

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> tuple[FilterNode, ...]:
        """Nodes in insertion order."""
        return tuple(self._nodes)

    def generate_label(self, prefix: str = SIMPLE_LABEL_PREFIX) -> str:
        """Allocate a new unique label such as ``[temp3]``."""
        label = f"[{prefix}{self._next_label}]"
        self._next_label += 1
        return label

    def add_filter(
        self,
        text: str,
        kind: FilterKind = FilterKind.SIMPLE,
        inputs: tuple[str, ...] | list[str] = (),
        outputs: tuple[str, ...] | list[str] = (),
        *,
        main_output: bool = False,
    ) -> FilterChain:
        """Append a filter node.

        Args:
            text: Filter text such as ``scale=640:-2``.
            kind: Whether the node belongs in ``-vf`` or ``-filter_complex``.
            inputs: Extra input labels. Main complex nodes receive these after
                the main video label; branch nodes receive only these.
            outputs: Explicit output labels. Complex nodes that declare
                outputs become branch nodes. When omitted a label is allocated.
            main_output: Make the first declared output the new main label.

        """
        branch = bool(outputs) and kind is FilterKind.COMPLEX
        if not outputs:
            prefix = COMPLEX_LABEL_PREFIX if kind is FilterKind.COMPLEX else SIMPLE_LABEL_PREFIX
            outputs = (self.generate_label(prefix),)
        node = FilterNode(
            text=text,
            kind=kind,
            inputs=tuple(inputs),
            outputs=tuple(outputs),
            branch=branch,
            main_output=main_output and branch,
        )
        self._nodes.append(node)
        return self

    def has_complex_filters(self) -> bool:
        """Whether any complex node was added."""
        return any(node.kind is FilterKind.COMPLEX for node in self._nodes)

    def simple_filters(self) -> tuple[str, ...]:
        """Texts of all simple nodes in insertion order."""
        return tuple(node.text for node in self._nodes if node.kind is FilterKind.SIMPLE)

    def render_simple(self) -> str | None:
        """Return the ``-vf`` chain, or ``None`` without simple nodes."""
        filters = self.simple_filters()
        return ",".join(filters) if filters else None

    def render_complex(self) -> str | None:
        """Return the ``-filter_complex`` graph, or ``None`` without complex nodes."""
        if not self.has_complex_filters():
            return None
        parts: list[str] = []
        main = MAIN_VIDEO
        for node in self._nodes:
            if node.kind is not FilterKind.COMPLEX:
                continue
            parts.append(node.render(main))
            if node.feeds_main:
                main = node.outputs[0]
        return ";".join(parts)

    def final_output_label(self) -> str:
        """Label to map to the output: the last main complex node's output."""
        main = MAIN_VIDEO
        for node in self._nodes:
            if node.feeds_main:
                main = node.outputs[0]
        return main

    def reset(self) -> None:
        """Drop all nodes and restart label numbering."""
        self._nodes = []
        self._next_label = 0


__all__ = ["FilterChain", "FilterNode"]

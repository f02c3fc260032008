"""
Composition Graph Traversal
===========================
Breadth-first walk over component definitions connected by link strategies.

Guarantees:
- Each reachable definition is passed to the visitor at most once, so
  cyclic mixin/extends declarations terminate
- The root itself is expanded but never visited
- Links are evaluated in DEFAULT_LINKS order, references in index order
- A visitor returning VisitResult.STOP ends the walk immediately
"""
from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Sequence, Set

from vueattrs.core.links import DEFAULT_LINKS, ComponentLink
from vueattrs.core.model import ComponentDefinition, CompositionEdge, VisitResult
from vueattrs.core.providers import ComponentIndex

logger = logging.getLogger(__name__)

Visitor = Callable[[ComponentDefinition], VisitResult]
EdgeCallback = Callable[[CompositionEdge], None]


def traverse(
    root: Optional[ComponentDefinition],
    visitor: Visitor,
    index: ComponentIndex,
    links: Sequence[ComponentLink] = DEFAULT_LINKS,
    on_edge: Optional[EdgeCallback] = None,
) -> VisitResult:
    """
    Visit every definition reachable from root.

    Args:
        root: Starting definition (None still expands global links)
        visitor: Called once per newly reached definition
        index: Index collaborator queried by the links
        links: Strategies to follow, in priority order
        on_edge: Optional callback receiving every resolved edge,
            including edges to already visited definitions

    Returns:
        VisitResult.STOP if the visitor stopped the walk, else CONTINUE
    """
    visited: Set[ComponentDefinition] = set()
    queue: Deque[Optional[ComponentDefinition]] = deque([root])
    if root is not None:
        visited.add(root)

    while queue:
        current = queue.popleft()
        for link in links:
            for reference in link.related_references(current, index):
                target = link.resolve(reference, index)
                if target is None:
                    logger.debug(
                        "Skipping stale %s reference %r", link.kind.value, reference.name
                    )
                    continue

                if on_edge is not None:
                    on_edge(CompositionEdge(source=current, target=target, kind=link.kind))

                if target in visited:
                    continue
                visited.add(target)
                queue.append(target)

                if visitor(target) is VisitResult.STOP:
                    logger.debug("Traversal stopped at %s", target.name)
                    return VisitResult.STOP

    return VisitResult.CONTINUE


def reachable_definitions(
    root: Optional[ComponentDefinition],
    index: ComponentIndex,
    links: Sequence[ComponentLink] = DEFAULT_LINKS,
) -> List[ComponentDefinition]:
    """All definitions reachable from root, in visit order."""
    found: List[ComponentDefinition] = []

    def collect(definition: ComponentDefinition) -> VisitResult:
        found.append(definition)
        return VisitResult.CONTINUE

    traverse(root, collect, index, links)
    return found

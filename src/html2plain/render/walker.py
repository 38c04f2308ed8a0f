from __future__ import annotations

from bs4.element import PageElement, Tag
from loguru import logger

from html2plain.render.classify import prefix_node, suffix_node
from html2plain.types import Enter, Exit, WalkResult, WorkItem


def walk(root: PageElement) -> str:
    return walk_tree(root).text


def walk_tree(root: PageElement) -> WalkResult:
    """Render ``root`` to raw text in document order.

    Traversal uses an explicit stack of Enter/Exit items instead of recursion so
    that deeply nested documents are bounded by memory rather than by the
    interpreter's recursion limit. A node's prefix is emitted before any of its
    children are entered and its suffix after all of them have exited.
    """
    output: list[str] = []
    stack: list[WorkItem] = [Enter(root)]
    processed = 0
    peak = len(stack)

    while stack:
        item = stack.pop()
        processed += 1
        node = item.node

        if isinstance(item, Enter):
            text, descend = prefix_node(node)
            output.append(text)
            stack.append(Exit(node))
            if descend and isinstance(node, Tag):
                # Reversed so the first child is popped first.
                stack.extend(Enter(child) for child in reversed(node.contents))
            if len(stack) > peak:
                peak = len(stack)
        else:
            output.append(suffix_node(node))

    logger.trace(f"Walked {processed} items (peak stack {peak})")
    return WalkResult(text="".join(output), items_processed=processed, peak_stack_depth=peak)

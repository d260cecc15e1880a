"""
Low-level XML parsing and node traversal.

lxml has no separate text-node objects: character data lives on the
element (``.text``) and on the previous sibling (``.tail``). NodeWalker
rebuilds a DOM-like node sequence from that layout:

    element
      leading text (element.text)
      child element ... (recursively)
      child tail text
      ...

Comments, processing instructions and entity references are leaf nodes.
Document-level comments / PIs before and after the root element are
visited too.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Union
from lxml import etree

logger = logging.getLogger(__name__)


NODE_ELEMENT = 'element'
NODE_TEXT = 'text'
NODE_COMMENT = 'comment'
NODE_PI = 'processing-instruction'
NODE_ENTITY = 'entity'


@dataclass(frozen=True)
class DocumentNode:
    """One node of a parsed document, as seen by the search driver."""
    kind: str
    text: str
    element: etree._Element  # owning element; for text nodes, the element holding the text

    @property
    def is_element(self) -> bool:
        return self.kind == NODE_ELEMENT


def parse_document(xml_path: Union[str, Path]) -> etree._ElementTree:
    """
    Parse an XML-family file into an lxml tree.

    Parsing is strict (no recovery) so malformed documents surface as
    errors and are reported by the caller. Entities are left unresolved
    and no network access is performed (DITA maps often reference remote
    DTDs).

    Args:
        xml_path: Path to the document

    Returns:
        Parsed element tree

    Raises:
        OSError: If the file cannot be read
        etree.XMLSyntaxError: If the document is not well-formed
    """
    parser = etree.XMLParser(
        resolve_entities=False,
        no_network=True,
        load_dtd=False,
        huge_tree=True,
        remove_blank_text=False,
    )
    # Read bytes ourselves so I/O problems raise OSError, not a parser error
    with open(xml_path, 'rb') as f:
        data = f.read()
    root = etree.fromstring(data, parser, base_url=str(xml_path))
    return root.getroottree()


def serialize_node(element: etree._Element) -> str:
    """Serialize an element (with descendants, without its tail)."""
    return etree.tostring(element, encoding='unicode', with_tail=False)


def _node_for(element: etree._Element) -> DocumentNode:
    tag = element.tag
    if tag is etree.Comment:
        kind = NODE_COMMENT
    elif tag is etree.ProcessingInstruction:
        kind = NODE_PI
    elif tag is etree.Entity:
        kind = NODE_ENTITY
    else:
        kind = NODE_ELEMENT
    return DocumentNode(kind=kind, text=serialize_node(element), element=element)



class _Frame:
    """Post-order bookkeeping for one node on the walk stack."""

    __slots__ = ('node', 'children', 'consumed')

    def __init__(self, node: DocumentNode, children: List[DocumentNode]):
        self.node = node
        self.children = iter(children)
        self.consumed = False  # a descendant has already been reported


class NodeWalker:
    """
    Traversal over every node of a parsed document.

    Iterating the walker yields nodes in pre-order. deepest_matches()
    yields the matching nodes that have no matching descendant: once a
    node is reported, all of its ancestors are consumed and never
    reported for the same content. The tree itself is never modified.

    Usage:
        walker = NodeWalker(tree)
        for node in walker.deepest_matches(lambda node: wanted(node.text)):
            report(node)
    """

    def __init__(self, tree: Union[etree._ElementTree, etree._Element]):
        if isinstance(tree, etree._ElementTree):
            self._root = tree.getroot()
        else:
            self._root = tree

    def _top_level(self) -> List[DocumentNode]:
        before = list(self._root.itersiblings(preceding=True))
        before.reverse()
        after = list(self._root.itersiblings())
        return [_node_for(el) for el in before + [self._root] + after]

    @staticmethod
    def children(node: DocumentNode) -> List[DocumentNode]:
        """Child nodes of node in document order (empty for leaves)."""
        if not node.is_element:
            return []

        element = node.element
        children = []
        if element.text:
            children.append(DocumentNode(kind=NODE_TEXT, text=element.text, element=element))
        for child in element:
            children.append(_node_for(child))
            if child.tail:
                children.append(DocumentNode(kind=NODE_TEXT, text=child.tail, element=child))
        return children

    def __iter__(self) -> Iterator[DocumentNode]:
        stack = list(reversed(self._top_level()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(self.children(node)))

    def deepest_matches(self, predicate: Callable[[DocumentNode], bool]) -> Iterator[DocumentNode]:
        """
        Yield matching nodes none of whose descendants match.

        Children are evaluated before their parent; a parent whose subtree
        already produced a match is skipped. Reported nodes never contain
        one another, so they come out in document order.

        Args:
            predicate: Decides whether a single node matches

        Yields:
            Deepest matching nodes
        """
        for top in self._top_level():
            stack = [_Frame(top, self.children(top))]
            while stack:
                frame = stack[-1]
                child = next(frame.children, None)
                if child is not None:
                    stack.append(_Frame(child, self.children(child)))
                    continue

                stack.pop()
                reported = not frame.consumed and predicate(frame.node)
                if reported:
                    yield frame.node
                if stack and (reported or frame.consumed):
                    stack[-1].consumed = True

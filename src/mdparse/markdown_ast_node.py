"""
Markdown syntax tree nodes.

Every node records the character range it was parsed from, so rules can locate
constructs in the source text and rewrite them in place.
"""

from enum import Enum
from typing import Any, List


class MarkdownASTNodeType(Enum):
    """The closed set of node kinds the parser produces."""

    DOCUMENT = "document"
    YAML = "yaml"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "listItem"
    BLOCKQUOTE = "blockquote"
    CODE = "code"
    INLINE_CODE = "inlineCode"
    LINK = "link"
    IMAGE = "image"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    FOOTNOTE_DEFINITION = "footnoteDefinition"
    FOOTNOTE_REFERENCE = "footnoteReference"
    MATH = "math"
    INLINE_MATH = "inlineMath"
    HTML = "html"
    THEMATIC_BREAK = "thematicBreak"
    TEXT = "text"


class MarkdownASTNode:
    """Base class for all Markdown AST nodes."""

    NODE_TYPE = MarkdownASTNodeType.DOCUMENT

    def __init__(self, start: int = 0, end: int = 0) -> None:
        """
        Initialize an AST node.

        Args:
            start: Offset of the first source character belonging to the node
            end: Offset one past the last source character belonging to the node
        """
        self.parent: 'MarkdownASTNode | None' = None
        self.children: List['MarkdownASTNode'] = []
        self.start = start
        self.end = end

    @property
    def node_type(self) -> MarkdownASTNodeType:
        """The kind of construct this node represents."""
        return self.NODE_TYPE

    def add_child(self, child: 'MarkdownASTNode') -> 'MarkdownASTNode':
        """
        Add a child node to this node.

        Args:
            child: The child node to add

        Returns:
            The added child node for method chaining
        """
        child.parent = self
        self.children.append(child)
        return child

    def remove_child(self, child: 'MarkdownASTNode') -> None:
        """
        Remove a child node from this node.

        Args:
            child: The child node to remove

        Raises:
            ValueError: If the child is not a child of this node
        """
        if child not in self.children:
            raise ValueError("Node is not a child of this node")

        self.children.remove(child)
        child.parent = None

    def previous_sibling(self) -> 'MarkdownASTNode | None':
        """
        Get the previous sibling of this node, if any.

        Returns:
            The previous sibling node, or None if this is the first child or has no parent
        """
        if self.parent is None:
            return None

        index = self.parent.children.index(self)
        if index > 0:
            return self.parent.children[index - 1]

        return None

    def next_sibling(self) -> 'MarkdownASTNode | None':
        """
        Get the next sibling of this node, if any.

        Returns:
            The next sibling node, or None if this is the last child or has no parent
        """
        if self.parent is None:
            return None

        index = self.parent.children.index(self)
        if index < len(self.parent.children) - 1:
            return self.parent.children[index + 1]

        return None

    def has_ancestor_of_type(self, node_type: MarkdownASTNodeType) -> bool:
        """
        Check whether any ancestor of this node is of a given kind.

        Args:
            node_type: The kind to look for

        Returns:
            True if an ancestor of that kind exists
        """
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.node_type == node_type:
                return True

            ancestor = ancestor.parent

        return False


class MarkdownASTVisitor:
    """
    Base visitor class for Markdown AST traversal.

    Dispatches to `visit_<ClassName>` methods, falling back to visiting children.
    """

    def visit(self, node: MarkdownASTNode) -> Any:
        """
        Visit a node and dispatch to the appropriate visit method.

        Args:
            node: The node to visit

        Returns:
            The result of visiting the node
        """
        method_name = f'visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self.generic_visit)
        return visitor(node)

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method for nodes without specific handlers.

        Args:
            node: The node to visit

        Returns:
            A list of results from visiting each child
        """
        results = []
        for child in node.children:
            results.append(self.visit(child))

        return results


class MarkdownASTDocumentNode(MarkdownASTNode):
    """Root node representing an entire document."""

    NODE_TYPE = MarkdownASTNodeType.DOCUMENT


class MarkdownASTYamlNode(MarkdownASTNode):
    """Node representing YAML frontmatter at the top of a document."""

    NODE_TYPE = MarkdownASTNodeType.YAML

    def __init__(self, value: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize a YAML frontmatter node.

        Args:
            value: The YAML text between the delimiters
            start: Offset of the opening delimiter
            end: Offset one past the closing delimiter
        """
        super().__init__(start, end)
        self.value = value


class MarkdownASTParagraphNode(MarkdownASTNode):
    """Node representing a paragraph."""

    NODE_TYPE = MarkdownASTNodeType.PARAGRAPH


class MarkdownASTHeadingNode(MarkdownASTNode):
    """Node representing an ATX or setext heading."""

    NODE_TYPE = MarkdownASTNodeType.HEADING

    def __init__(self, level: int, setext: bool = False, start: int = 0, end: int = 0) -> None:
        """
        Initialize a heading node.

        Args:
            level: The heading level (1-6)
            setext: True if the heading was written with an underline
            start: Offset of the first heading character
            end: Offset one past the last heading character
        """
        super().__init__(start, end)

        # Level should be 1-6
        self.level = max(1, min(6, level))
        self.setext = setext


class MarkdownASTListNode(MarkdownASTNode):
    """Node representing an ordered or unordered list."""

    NODE_TYPE = MarkdownASTNodeType.LIST

    def __init__(self, ordered: bool, marker: str, start_number: int = 1, start: int = 0, end: int = 0) -> None:
        """
        Initialize a list node.

        Args:
            ordered: True for numbered lists
            marker: The bullet character, or the delimiter after the number for ordered lists
            start_number: The number of the first item of an ordered list
            start: Offset of the first item's marker
            end: Offset one past the end of the last item
        """
        super().__init__(start, end)
        self.ordered = ordered
        self.marker = marker
        self.start_number = start_number


class MarkdownASTListItemNode(MarkdownASTNode):
    """Node representing a list item."""

    NODE_TYPE = MarkdownASTNodeType.LIST_ITEM

    def __init__(self, checked: bool | None = None, start: int = 0, end: int = 0) -> None:
        """
        Initialize a list item node.

        Args:
            checked: Task list state, or None if the item has no checkbox
            start: Offset of the item's marker
            end: Offset one past the item's last content character
        """
        super().__init__(start, end)
        self.checked = checked


class MarkdownASTBlockquoteNode(MarkdownASTNode):
    """Node representing a blockquote."""

    NODE_TYPE = MarkdownASTNodeType.BLOCKQUOTE


class MarkdownASTCodeBlockNode(MarkdownASTNode):
    """Node representing a fenced or indented code block."""

    NODE_TYPE = MarkdownASTNodeType.CODE

    def __init__(self, fence: str, language: str = "", start: int = 0, end: int = 0) -> None:
        """
        Initialize a code block node.

        Args:
            fence: The opening fence (for example "```"), or an empty string for indented code
            language: The info string after the opening fence
            start: Offset of the opening fence or first code character
            end: Offset one past the closing fence or last code character
        """
        super().__init__(start, end)
        self.fence = fence
        self.language = language
        self.content = ""


class MarkdownASTInlineCodeNode(MarkdownASTNode):
    """Node representing inline code."""

    NODE_TYPE = MarkdownASTNodeType.INLINE_CODE

    def __init__(self, content: str = "", start: int = 0, end: int = 0) -> None:
        """
        Initialize an inline code node.

        Args:
            content: The code content
            start: Offset of the opening backticks
            end: Offset one past the closing backticks
        """
        super().__init__(start, end)
        self.content = content


class MarkdownASTLinkNode(MarkdownASTNode):
    """Node representing a link."""

    NODE_TYPE = MarkdownASTNodeType.LINK

    def __init__(self, url: str, title: str | None = None, start: int = 0, end: int = 0) -> None:
        """
        Initialize a link node.

        Args:
            url: The link destination
            title: Optional link title
            start: Offset of the opening bracket
            end: Offset one past the closing parenthesis
        """
        super().__init__(start, end)
        self.url = url
        self.title = title


class MarkdownASTImageNode(MarkdownASTNode):
    """Node representing an image."""

    NODE_TYPE = MarkdownASTNodeType.IMAGE

    def __init__(self, url: str, alt_text: str, title: str | None = None, start: int = 0, end: int = 0) -> None:
        """
        Initialize an image node.

        Args:
            url: The image source
            alt_text: The alternative text
            title: Optional image title
            start: Offset of the leading "!"
            end: Offset one past the closing parenthesis
        """
        super().__init__(start, end)
        self.url = url
        self.alt_text = alt_text
        self.title = title


class MarkdownASTEmphasisNode(MarkdownASTNode):
    """Node representing emphasized text."""

    NODE_TYPE = MarkdownASTNodeType.EMPHASIS

    def __init__(self, marker: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize an emphasis node.

        Args:
            marker: The delimiter character, "*" or "_"
            start: Offset of the opening delimiter
            end: Offset one past the closing delimiter
        """
        super().__init__(start, end)
        self.marker = marker


class MarkdownASTStrongNode(MarkdownASTNode):
    """Node representing strong (bold) text."""

    NODE_TYPE = MarkdownASTNodeType.STRONG

    def __init__(self, marker: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize a strong node.

        Args:
            marker: The delimiter character, "*" or "_"
            start: Offset of the opening delimiters
            end: Offset one past the closing delimiters
        """
        super().__init__(start, end)
        self.marker = marker


class MarkdownASTFootnoteDefinitionNode(MarkdownASTNode):
    """Node representing a footnote definition (`[^label]: text`)."""

    NODE_TYPE = MarkdownASTNodeType.FOOTNOTE_DEFINITION

    def __init__(self, label: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize a footnote definition node.

        Args:
            label: The footnote label without brackets or caret
            start: Offset of the opening bracket
            end: Offset one past the last content character
        """
        super().__init__(start, end)
        self.label = label


class MarkdownASTFootnoteReferenceNode(MarkdownASTNode):
    """Node representing a footnote reference (`[^label]`)."""

    NODE_TYPE = MarkdownASTNodeType.FOOTNOTE_REFERENCE

    def __init__(self, label: str, start: int = 0, end: int = 0) -> None:
        super().__init__(start, end)
        self.label = label


class MarkdownASTMathNode(MarkdownASTNode):
    """Node representing a display math block fenced by dollar signs."""

    NODE_TYPE = MarkdownASTNodeType.MATH

    def __init__(self, fence: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize a math block node.

        Args:
            fence: The opening run of dollar signs
            start: Offset of the opening fence
            end: Offset one past the closing fence
        """
        super().__init__(start, end)
        self.fence = fence
        self.content = ""


class MarkdownASTInlineMathNode(MarkdownASTNode):
    """Node representing inline math."""

    NODE_TYPE = MarkdownASTNodeType.INLINE_MATH

    def __init__(self, content: str = "", start: int = 0, end: int = 0) -> None:
        super().__init__(start, end)
        self.content = content


class MarkdownASTHtmlNode(MarkdownASTNode):
    """Node representing raw HTML, either a block or an inline tag."""

    NODE_TYPE = MarkdownASTNodeType.HTML

    def __init__(self, content: str = "", start: int = 0, end: int = 0) -> None:
        super().__init__(start, end)
        self.content = content


class MarkdownASTThematicBreakNode(MarkdownASTNode):
    """Node representing a thematic break (horizontal rule)."""

    NODE_TYPE = MarkdownASTNodeType.THEMATIC_BREAK


class MarkdownASTTextNode(MarkdownASTNode):
    """Node representing plain text content."""

    NODE_TYPE = MarkdownASTNodeType.TEXT

    def __init__(self, content: str, start: int = 0, end: int = 0) -> None:
        """
        Initialize a text node.

        Args:
            content: The text content
            start: Offset of the first character
            end: Offset one past the last character
        """
        super().__init__(start, end)
        self.content = content

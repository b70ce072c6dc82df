from typing import Any, Dict, List, Optional


def convert_rich_text_to_markdown(content: Optional[Dict[str, Any]]) -> str:
    """
    Convert a Payload rich text document into markdown.

    Only headings, paragraphs, bullet lists and links are understood; any other
    block type is dropped. Blocks are separated by a blank line.
    """
    if not isinstance(content, dict):
        return ""
    root = content.get("root")
    if not isinstance(root, dict):
        return ""
    blocks = root.get("children")
    if not blocks:
        return ""

    rendered = (_convert_block(node) for node in blocks if isinstance(node, dict))
    return "\n\n".join(block for block in rendered if block)


def _convert_block(node: Dict[str, Any]) -> str:
    node_type = node.get("type")

    if node_type == "heading":
        level = _heading_level(node.get("tag"))
        return f"{'#' * level} {_join_text(node.get('children'))}"

    if node_type == "paragraph":
        return _join_text(node.get("children"))

    if node_type == "list":
        items = [
            f"- {_join_text(item.get('children'))}"
            for item in node.get("children") or []
            if isinstance(item, dict) and item.get("type") == "list-item"
        ]
        return "\n".join(item for item in items if item)

    if node_type == "link":
        return f"[{_join_text(node.get('children'))}]({node.get('url') or ''})"

    return ""


def _heading_level(tag: Optional[str]) -> int:
    # "h3" -> 3
    if not tag:
        return 1
    try:
        level = int(str(tag)[1:])
    except ValueError:
        return 1
    return level if level > 0 else 1


def _join_text(children: Optional[List[Dict[str, Any]]]) -> str:
    if not children:
        return ""
    return "".join(
        str(child.get("text") or "") for child in children if isinstance(child, dict)
    )

import io

from arbortools.printing import print_tree, render
from arbortools.tree import Node


def three_nodes():
    root = Node(98)
    root.insert_left(12)
    root.insert_right(402)
    return root


def bigger_tree():
    root = three_nodes()
    root.left.insert_left(6)
    root.left.insert_right(16)
    root.right.insert_left(256)
    root.right.insert_right(512)
    root.left.left.insert_left(1)
    return root


def test_render_worked_example():
    assert render(three_nodes()) == "  .--(098)--.\n(012)     (402)"


def test_render_single_node():
    assert render(Node(7)) == "(007)"


def test_render_negative_value():
    assert render(Node(-5)) == "(-05)"


def test_render_empty():
    assert render(None) == ""


def test_render_line_count_matches_height():
    tree = bigger_tree()
    lines = render(tree).split("\n")
    assert len(lines) == tree.height() + 1


def test_render_contains_every_label_once():
    tree = bigger_tree()
    text = render(tree)
    for value in tree.preorder():
        assert text.count(f"({value:03d})") == 1


def test_render_levels_hold_their_nodes():
    tree = bigger_tree()
    lines = render(tree).split("\n")
    assert "(098)" in lines[0]
    assert "(012)" in lines[1] and "(402)" in lines[1]
    assert "(001)" in lines[3]


def test_render_labels_in_inorder_left_to_right():
    tree = bigger_tree()
    text = render(tree)
    positions = []
    for value in tree.inorder():
        label = f"({value:03d})"
        line = next(line for line in text.split("\n") if label in line)
        positions.append(line.index(label))
    assert positions == sorted(positions)


def test_render_has_no_trailing_spaces():
    for line in render(bigger_tree()).split("\n"):
        assert line == line.rstrip(" ")


def test_print_tree_writes_render_with_newline():
    tree = bigger_tree()
    out = io.StringIO()
    print_tree(tree, out)
    assert out.getvalue() == render(tree) + "\n"


def test_print_tree_empty_writes_nothing():
    out = io.StringIO()
    print_tree(None, out)
    assert out.getvalue() == ""


def test_print_tree_defaults_to_stdout(capsys):
    print_tree(three_nodes())
    assert capsys.readouterr().out == render(three_nodes()) + "\n"
"""Tests for the arena scope tree and qualified names."""

import pytest
from scopedoc_mcp.parser import FileInfo, Variable, parse_file
from scopedoc_mcp.parser.entities import sanitize


SOURCE = '''class Foo:
    def bar(self):
        y = 1
'''


def test_qualified_names():
    """Test qualified names concatenate tagged ancestor names."""
    tree = parse_file(SOURCE, "main.py", "src/app")
    foo = tree.file.classes[0]
    bar = foo.methods[0]
    y = bar.variables[0]

    assert tree.qualified_name(tree.file) == "D_src_app_F_main"
    assert tree.qualified_name(foo) == "D_src_app_F_main_C_Foo"
    assert tree.qualified_name(bar) == "D_src_app_F_main_C_Foo_M_bar"
    assert tree.qualified_name(y) == "D_src_app_F_main_C_Foo_M_bar_V_y"


def test_unnamed_variable_qualified_name():
    """Test anonymous statements get a placeholder name."""
    tree = parse_file("print(1)\n", "test.py")
    assert tree.qualified_name(tree.file.variables[0]) == "D__F_test_V_unnamed"


def test_file_identity():
    """Test file name, directory and path are recorded."""
    tree = parse_file("", "pkg/main.py", "src")

    assert tree.file.name == "main"
    assert tree.file.filename == "main.py"
    assert tree.file.directory == "src"
    assert tree.file.path == "src/pkg/main.py"


def test_parent_links_are_ids():
    """Test children refer to their owner by arena index."""
    tree = parse_file(SOURCE, "main.py")
    bar = tree.file.classes[0].methods[0]
    y = bar.variables[0]

    assert all(node.id == i for i, node in enumerate(tree.nodes))
    assert y.parent == bar.id
    assert tree.file.parent is None
    assert tree.get(y.id) is y


def test_ancestors_and_get_file():
    """Test upward navigation ends at the file."""
    tree = parse_file(SOURCE, "main.py")
    foo = tree.file.classes[0]
    bar = foo.methods[0]
    y = bar.variables[0]

    assert tree.parent_of(y) is bar
    assert list(tree.ancestors(y)) == [bar, foo, tree.file]
    assert tree.get_file(y) is tree.file
    assert tree.get_file(tree.file) is tree.file


def test_find_container():
    """Test containers are found by qualified name."""
    tree = parse_file(SOURCE, "main.py")

    assert tree.find_container("D__F_main_C_Foo") is tree.file.classes[0]
    assert tree.find_container("D__F_main_C_Missing") is None


def test_add_child():
    """Test add_child registers and appends to the matching collection."""
    tree = parse_file(SOURCE, "main.py")
    foo = tree.file.classes[0]

    variable = tree.add_child(foo, Variable(name="z", assignment="2", indent=4, line=3))

    assert foo.variables == [variable]
    assert variable.parent == foo.id
    assert tree.nodes[-1] is variable


def test_add_child_rejects_files():
    """Test a file cannot be nested inside another container."""
    tree = parse_file(SOURCE, "main.py")
    with pytest.raises(ValueError):
        tree.add_child(tree.file, FileInfo(name="other"))


def test_clear_all():
    """Test clear_all resets the tree to an empty file."""
    tree = parse_file(SOURCE, "main.py")
    tree.clear_all()

    assert not tree.file.has_children()
    assert tree.nodes == [tree.file]


def test_sanitize():
    """Test non-alphanumeric runs collapse to underscores."""
    assert sanitize("src/utils-x") == "src_utils_x"
    assert sanitize("a..b") == "a_b"

import pytest

from text_trees import StringTreeNode, TreeNode


def make_family_tree() -> TreeNode[str]:
    return StringTreeNode.with_child_nodes(
        "root",
        [
            StringTreeNode("Uncle"),
            StringTreeNode.with_child_nodes(
                "Parent",
                [
                    StringTreeNode.with_children("Child 1", ["Grand Child 1"]),
                    StringTreeNode.with_child_nodes(
                        "Child 2",
                        [
                            StringTreeNode.with_child_nodes(
                                "Grand Child 2",
                                [StringTreeNode.with_children("Great Grand Child 2", ["Great Great Grand Child 2"])],
                            )
                        ],
                    ),
                ],
            ),
            StringTreeNode.with_children("Aunt", ["Child 3"]),
        ],
    )


@pytest.fixture
def family_tree() -> TreeNode[str]:
    return make_family_tree()

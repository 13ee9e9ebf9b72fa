from typing import Dict

from .pydantic_models import CategoryNode, TreeBundle


def _node(node_id: int, name: str = None, *sub_categories: CategoryNode) -> CategoryNode:
    return CategoryNode(id=node_id, name=name, sub_categories=list(sub_categories))


tree_bundles: Dict[str, TreeBundle] = {
    "example": TreeBundle(
        roots=[_node(1, None, _node(2), _node(3, None, _node(4)))],
        description="Single root with two branches.",
        default_ids="4,1,3",
    ),
    "two-roots": TreeBundle(
        roots=[_node(10), _node(20, None, _node(21))],
        description="Two roots, the second with one child.",
        default_ids="20,21",
    ),
    "catalog": TreeBundle(
        roots=[
            _node(
                100,
                "Electronics",
                _node(
                    110,
                    "Computers",
                    _node(111, "Laptops", _node(1111, "Gaming"), _node(1112, "Ultrabooks")),
                    _node(112, "Desktops"),
                    _node(113, "Accessories", _node(1131, "Keyboards"), _node(1132, "Mice")),
                ),
                _node(120, "Phones", _node(121, "Smartphones"), _node(122, "Cases")),
            ),
            _node(
                200,
                "Home",
                _node(210, "Kitchen", _node(211, "Cookware"), _node(212, "Cutlery")),
                _node(220, "Furniture", _node(221, "Chairs"), _node(222, "Tables")),
            ),
            _node(
                300,
                "Books",
                _node(310, "Fiction"),
                _node(320, "Science", _node(321, "Physics")),
            ),
        ],
        description="Product category hierarchy.",
        default_ids="1111,100,110,111",
    ),
}

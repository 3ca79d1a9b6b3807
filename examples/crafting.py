"""Crafting recipes: which items to craft, in order, to get one item.

Run with `python examples/crafting.py`.
"""

from szyk import CyclicDependencyError, Node, TargetNotFoundError, topsort, topsort_values

# Each recipe lists the items it needs
recipes = [
    Node("wooden pickaxe", ["planks", "sticks"], "Pickaxe"),
    Node("planks", ["wood"], "Planks"),
    Node("sticks", ["planks"], "Sticks"),
    Node("wood", [], "Wood"),
    Node("stone pickaxe", ["cobblestone", "sticks"], "Stone Pickaxe"),
    Node("cobblestone", ["wooden pickaxe"], "Cobblestone"),
    Node("furnace", ["cobblestone", "coal"], "Furnace"),  # no recipe for coal
]

print(topsort_values(recipes, "wooden pickaxe"))


# Callback form: print a step list
def show(node: Node[str, str]) -> None:
    needs = ", ".join(node.deps) or "nothing"
    print(f"  craft {node.id} (needs {needs})")


print("To get a stone pickaxe:")
topsort(recipes, "stone pickaxe", show)

try:
    topsort_values(recipes, "furnace")
except TargetNotFoundError as e:
    print(f"Cannot craft a furnace: no recipe for {e.id!r}")

try:
    topsort_values([Node("egg", ["chicken"]), Node("chicken", ["egg"])], "egg")
except CyclicDependencyError as e:
    print(f"Cycle closed by {e.id!r}")

import matplotlib.pyplot as plt

from markedcycles.cells.incidence import nested_cells
from markedcycles.viz.draw import draw_incidence_forest

n = 6  # replace

fig, axes = plt.subplots(1, 2, figsize=(16, 5))
for ax, crit in zip(axes, (1, 2)):
    nested = nested_cells(n, crit, 0, dynatomic=True)
    draw_incidence_forest(nested, binary=True, ax=ax)
    ax.set_title(f"dynatomic cells, period {n}, critical period {crit}")
plt.tight_layout()
plt.show()

import sys, os
ROOT = os.path.dirname(__file__)
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import numpy as np
import matplotlib.pyplot as plt

from shellgame.factories.stages import STAGE_CONFIGS
from shellgame.systems.shuffle_scheduler import arc_positions
from shellgame.ui.layout import layout_slots


def arc_path(start_a, start_b, samples=100):
    """Sample both cup paths of one swap; returns two (samples, 2) arrays."""
    ts = np.linspace(0.0, 1.0, samples)
    points = [arc_positions(start_a, start_b, t) for t in ts]
    path_a = np.array([a for a, _ in points])
    path_b = np.array([b for _, b in points])
    return path_a, path_b


fig, axes = plt.subplots(1, 2, figsize=(11, 4))
for ax, cup_count in zip(axes, (3, 5)):
    slots = layout_slots(cup_count)
    for i, a in enumerate(slots):
        for b in slots[i + 1:]:
            path_a, path_b = arc_path(a, b)
            ax.plot(path_a[:, 0], path_a[:, 1], alpha=0.6)
            ax.plot(path_b[:, 0], path_b[:, 1], alpha=0.6, linestyle="--")
    xs, ys = zip(*slots)
    ax.scatter(xs, ys, s=400, facecolors="none", edgecolors="black", label="Cup slots")
    ax.set_xlim(0, 900)
    ax.set_ylim(500, 0)  # model space, y grows downward
    ax.set_title(f"Swap arcs, {cup_count} cups")
    ax.legend(loc="lower right")
    ax.grid(True)

stages = sorted(STAGE_CONFIGS)
fig2, ax2 = plt.subplots(figsize=(7, 4))
durations = [STAGE_CONFIGS[s].swap_duration_ticks for s in stages]
ax2.bar(np.array(stages) - 0.2, durations, width=0.4, label="Ticks per swap")
ax2.bar(np.array(stages) + 0.2, [STAGE_CONFIGS[s].swap_count for s in stages], width=0.4, label="Swaps per round")
ax2.set_xticks(stages)
ax2.set_xlabel("Stage")
ax2.set_title("Shuffle difficulty by stage")
ax2.legend()
ax2.grid(True, axis="y")
plt.show()

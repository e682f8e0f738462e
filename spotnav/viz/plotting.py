from __future__ import annotations

from typing import Sequence

import numpy as np
import matplotlib.pyplot as plt

from ..geometry import Pose

STATUS_KEYS = ("mode", "step", "segment", "correction", "speed", "rate", "regime")


def draw_scene(
    ax,
    samples: Sequence[Pose] | None,
    pose: Pose,
    light_radius: float,
    trajectory: np.ndarray | None = None,
    status: dict | None = None,
    target: Pose | None = None,
):
    ax.clear()
    if samples:
        pts = np.array([[p.x, p.y] for p in samples])
        ax.plot(pts[:, 0], pts[:, 1], "c-", linewidth=1.5, alpha=0.9, label="track")
        ax.plot(pts[:, 0], pts[:, 1], "co", markersize=2, alpha=0.7)

    if trajectory is not None and len(trajectory) > 1:
        traj = np.asarray(trajectory, dtype=float)
        ax.plot(traj[:, 0], traj[:, 1], "b-", linewidth=1.0, alpha=0.6, label="robot")

    if target is not None:
        ax.plot(target.x, target.y, "gx", markersize=8, markeredgewidth=2, label="target")
        ax.arrow(target.x, target.y, 0.2 * np.cos(target.theta), 0.2 * np.sin(target.theta), head_width=0.04, color="g")

    x, y, th = pose.as_tuple()
    ax.plot(x, y, "bo")
    ax.arrow(x, y, 0.3 * np.cos(th), 0.3 * np.sin(th), head_width=0.05, color="b")
    c = pose.transform_point((light_radius, 0.0))
    ax.add_patch(plt.Circle((c[0], c[1]), light_radius, color="orange", fill=False, linewidth=1.5))

    ax.set_aspect("equal")
    ax.set_title("Track (cyan), robot (blue), light spot (orange), target (green x)")

    if status:
        lines = []
        for k in STATUS_KEYS:
            if k in status and status[k] is not None:
                v = status[k]
                if isinstance(v, float):
                    v = f"{v:.2f}"
                lines.append(f"{k}: {v}")
        if lines:
            ax.text(
                0.02,
                0.98,
                "\n".join(lines),
                transform=ax.transAxes,
                va="top",
                ha="left",
                fontsize=8,
                bbox=dict(boxstyle="round", facecolor="white", alpha=0.7),
            )
    return ax

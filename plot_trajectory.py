"""Plot the animated-position trajectory from trajectory.csv.

Creates one figure per node_id with:
- value vs t
- release_velocity vs t, with the animating intervals shaded

Run:
    python plot_trajectory.py

By default, reads ./trajectory.csv (same directory as this script), as written
by main.py.
"""

from __future__ import annotations

import os

import pandas as pd
import matplotlib.pyplot as plt

from config_param import TRAJECTORY_CSV


def main() -> int:
    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TRAJECTORY_CSV)

    if not os.path.exists(csv_path):
        print(f"CSV not found: {csv_path}")
        return 1

    df = pd.read_csv(csv_path)

    required_cols = {"node_id", "t", "value", "release_velocity", "animating"}
    missing = required_cols - set(df.columns)
    if missing:
        print(f"Missing columns in CSV: {sorted(missing)}")
        return 1

    if df.empty:
        print("CSV is empty.")
        return 0

    # Ensure numeric types and sort by time.
    df = df.copy()
    df["node_id"] = pd.to_numeric(df["node_id"], errors="coerce").astype("Int64")
    df["t"] = pd.to_numeric(df["t"], errors="coerce")
    df["value"] = pd.to_numeric(df["value"], errors="coerce")
    df["release_velocity"] = pd.to_numeric(df["release_velocity"], errors="coerce")
    df["animating"] = df["animating"].astype(str).str.lower() == "true"
    df = df.dropna(subset=["node_id", "t", "value", "release_velocity"]).sort_values("t")

    node_ids = sorted(df["node_id"].unique())
    if len(node_ids) == 0:
        print("No valid rows to plot.")
        return 0

    for node_id in node_ids:
        df_node = df[df["node_id"] == node_id].sort_values("t")

        fig, (ax_pos, ax_v) = plt.subplots(2, 1, sharex=True, figsize=(10, 7))
        fig.suptitle(f"Animated position - node_id={int(node_id)}")

        ax_pos.plot(df_node["t"], df_node["value"], linewidth=1.2, drawstyle="steps-post", label="value")
        ax_pos.fill_between(
            df_node["t"],
            df_node["value"].min(),
            df_node["value"].max(),
            where=df_node["animating"],
            step="post",
            alpha=0.15,
            label="animating",
        )
        ax_pos.set_ylabel("position")
        ax_pos.grid(True, alpha=0.3)
        ax_pos.legend(loc="best")

        ax_v.plot(df_node["t"], df_node["release_velocity"], linewidth=1.0, drawstyle="steps-post")
        ax_v.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
        ax_v.set_ylabel("release velocity (units/s)")
        ax_v.set_xlabel("t (s)")
        ax_v.grid(True, alpha=0.3)

        fig.tight_layout()

    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

"""Closed-loop simulation of the guidance core on a unicycle robot.

Examples:
    python scripts/simulate.py --mode track --steps 400
    python scripts/simulate.py --mode goto --target 1.5 0.8 1.57 --variant dock
    python scripts/simulate.py --config configs/guidance/line.yaml --mode goto --plot
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List

import numpy as np

from spotnav.config import GuidanceConfig
from spotnav.control.approach import classify
from spotnav.geometry import Pose
from spotnav.navigation import Guidance, GuidanceMode
from spotnav.sim import UnicycleModel, polyline_track
from spotnav.utils import load_guidance_config, setup_logger


def demo_track(spacing: float) -> List[Pose]:
    waypoints = np.array(
        [[0.0, 0.0], [2.0, 0.0], [3.0, 1.0], [3.0, 3.0], [1.5, 4.0], [0.0, 3.5]], dtype=float
    )
    return polyline_track(waypoints, spacing)


def run_track(cfg: GuidanceConfig, robot: UnicycleModel, args) -> Dict[str, Any]:
    samples = demo_track(args.spacing)
    guidance = Guidance(cfg)
    guidance.set_mode(GuidanceMode.TRACK_FOLLOW)
    traj = [robot.as_pose().as_tuple()[:2]]
    lost_at = None
    for t in range(args.steps):
        pose = robot.as_pose()
        correction = guidance.step(pose, samples=samples)
        if correction is None:
            lost_at = t
            break
        robot.apply_command((args.cruise, args.k_turn * correction), args.dt)
        traj.append(robot.as_pose().as_tuple()[:2])
    return {
        "samples": samples,
        "trajectory": np.asarray(traj),
        "progress": guidance.progress.index,
        "lost_at": lost_at,
    }


def run_goto(cfg: GuidanceConfig, robot: UnicycleModel, args) -> Dict[str, Any]:
    target = Pose.from_xy_angle(args.target[:2], args.target[2])
    guidance = Guidance(cfg)
    guidance.set_mode(GuidanceMode.GOTO)
    traj = [robot.as_pose().as_tuple()[:2]]
    reached_at = None
    for t in range(args.steps):
        pose = robot.as_pose()
        cmd = guidance.step(pose, target=target)
        if cmd is None:
            reached_at = t
            break
        robot.apply_command(cmd, args.dt)
        traj.append(robot.as_pose().as_tuple()[:2])
    final = robot.as_pose()
    return {
        "target": target,
        "trajectory": np.asarray(traj),
        "reached_at": reached_at,
        "final_regime": classify(final.inverse() * target, cfg.light_radius, cfg.approach).value,
    }


def main():
    parser = argparse.ArgumentParser(description="Simulate light-spot track following or point approach")
    parser.add_argument("--mode", choices=["track", "goto"], default="track")
    parser.add_argument("--config", type=str, default=None, help="YAML guidance config")
    parser.add_argument("--variant", type=str, default=None, help="Approach variant: default|line|dock")
    parser.add_argument("--set", nargs="*", default=[], help="OmegaConf dotlist overrides, e.g. light_radius=0.25")
    parser.add_argument("--steps", type=int, default=600)
    parser.add_argument("--dt", type=float, default=0.05)
    parser.add_argument("--v-max", type=float, default=0.5, help="Robot speed (m/s) at normalized speed 1.0")
    parser.add_argument("--w-max", type=float, default=2.0)
    parser.add_argument("--cruise", type=float, default=0.6, help="Normalized speed while following")
    parser.add_argument("--k-turn", type=float, default=2.0, help="Turn rate per radian of correction")
    parser.add_argument("--spacing", type=float, default=0.05, help="Track sample spacing (m)")
    parser.add_argument("--target", type=float, nargs=3, default=[1.5, 0.8, 1.57], metavar=("X", "Y", "TH"))
    parser.add_argument("--plot", action="store_true")
    parser.add_argument("--log-file", type=str, default=None)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    log = setup_logger("spotnav", args.log_file, level=logging.DEBUG if args.debug else logging.INFO)

    overrides = list(args.set)
    if args.variant:
        overrides.append(f"approach.variant={args.variant}")
    cfg = load_guidance_config(args.config, overrides)
    log.info("light_radius=%.3f lookahead=%d approach=%s", cfg.light_radius, cfg.track.lookahead, cfg.approach)

    robot = UnicycleModel(v_max=args.v_max, w_max=args.w_max)
    robot.reset()

    if args.mode == "track":
        res = run_track(cfg, robot, args)
        if res["lost_at"] is None:
            log.info("followed track for %d steps, progress index %d", args.steps, res["progress"])
        else:
            log.info("track lost at step %d, progress index %d/%d", res["lost_at"], res["progress"], len(res["samples"]))
    else:
        res = run_goto(cfg, robot, args)
        if res["reached_at"] is None:
            log.info("target not reached in %d steps (regime %s)", args.steps, res["final_regime"])
        else:
            log.info("target reached at step %d", res["reached_at"])

    if args.plot:
        import matplotlib.pyplot as plt

        from spotnav.viz.plotting import draw_scene

        fig, ax = plt.subplots(figsize=(6, 6))
        draw_scene(
            ax,
            res.get("samples"),
            robot.as_pose(),
            cfg.light_radius,
            trajectory=res["trajectory"],
            target=res.get("target"),
            status={"mode": args.mode, "step": len(res["trajectory"]) - 1},
        )
        plt.show()


if __name__ == "__main__":
    main()

# snek/main.py
import argparse

from snek.config import AppConfig
from snek.runners.run_snake import main as snake

def parse_args(argv=None):
    p = argparse.ArgumentParser(prog="snek")
    p.add_argument("mode", nargs="?", default="play", choices=["play"])
    p.add_argument("--width", type=int, default=None, help="grid width in cells")
    p.add_argument("--height", type=int, default=None, help="grid height in cells")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell", type=int, default=None, help="cell size in pixels")
    p.add_argument("--log", default=None, help="append run events to this CSV file")
    p.add_argument("--record-dir", default=None, help="save every frame as PNG here")
    return p.parse_args(argv)

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {
        "grid_w": args.width,
        "grid_h": args.height,
        "seed": args.seed,
        "render_cell": args.cell,
        "log_path": args.log,
        "render_record_dir": args.record_dir,
    }
    return cfg.with_(**{k: v for k, v in overrides.items() if v is not None}).validate()

def main(argv=None):
    args = parse_args(argv)
    cfg = build_config(args)
    if args.mode == "play":
        snake(cfg)

if __name__ == "__main__":
    main()

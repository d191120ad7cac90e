# main.py
import argparse
import logging

from config import AppConfig
from runners.run_snake import main as snake
from runners.run_headless import main as headless

def parse_args():
    p = argparse.ArgumentParser()
    p.add_argument("mode", choices=["play", "headless"], nargs="?", default="play")
    p.add_argument("--grid-w", type=int, default=None)
    p.add_argument("--grid-h", type=int, default=None)
    p.add_argument("--tick-ms", type=int, default=None)
    p.add_argument("--start-len", type=int, default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--cell-px", type=int, default=None)
    p.add_argument("--grid-lines", action="store_true")
    p.add_argument("--record-dir", default=None)
    p.add_argument("--highscore", default=None, help="path of the high score file")
    p.add_argument("--no-highscore", action="store_true", help="keep the high score in memory only")
    p.add_argument("--sessions", type=int, default=5, help="headless: sessions to play")
    p.add_argument("--turn-prob", type=float, default=0.2, help="headless: chance of a turn request per tick")
    p.add_argument("--max-ticks", type=int, default=10_000, help="headless: tick cap per session")
    p.add_argument("--show-board", action="store_true", help="headless: print the final board")
    p.add_argument("--log-level", default="WARNING")
    return p.parse_args()

def build_config(args) -> AppConfig:
    cfg = AppConfig()
    overrides = {
        "grid_w": args.grid_w,
        "grid_h": args.grid_h,
        "tick_ms": args.tick_ms,
        "start_len": args.start_len,
        "seed": args.seed,
        "render_cell": args.cell_px,
        "render_record_dir": args.record_dir,
        "highscore_path": args.highscore,
    }
    cfg = cfg.with_(**{k: v for k, v in overrides.items() if v is not None})
    if args.grid_lines:
        cfg = cfg.with_(render_grid_lines=True)
    if args.no_highscore:
        cfg = cfg.with_(highscore_path=None)
    return cfg

def main():
    args = parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    cfg = build_config(args)
    if args.mode == "play":
        snake(cfg)
    elif args.mode == "headless":
        headless(cfg, sessions=args.sessions, turn_prob=args.turn_prob,
                 max_ticks=args.max_ticks, show_board=args.show_board)

if __name__ == "__main__":
    main()

"""
Command line entry point: ``python -m grapple2d``.
"""

from typing import List, Optional
import argparse
import logging
from .engine import Session
from .io import ConfigLoader

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='grapple2d',
                                     description='Grapple-and-climb physics playground')
    parser.add_argument('--config', help='JSON or YAML file with physics and viewport sections')
    parser.add_argument('--width', type=int, help='viewport width in pixels')
    parser.add_argument('--height', type=int, help='viewport height in pixels')
    parser.add_argument('--frames', type=int,
                        help='run this many frames without a window and print the final state')
    parser.add_argument('--save', help='save a PNG of the start frame instead of playing')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def create_session(args: argparse.Namespace) -> Session:
    config = ConfigLoader.load_config(args.config) if args.config else {}
    viewport = dict(config.get('viewport', {}))
    if args.width:
        viewport['width'] = args.width
    if args.height:
        viewport['height'] = args.height
    config['viewport'] = viewport
    return ConfigLoader.create_session_from_config(config)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    session = create_session(args)

    if args.frames:
        session.run_frames(args.frames)
        state = session.get_state()
        print(f"frame {state['frame']}: position {state['position']}, "
              f"state {state['state']}, cam_y {state['cam_y']:.2f}")
        return 0

    # Imported here so headless runs do not need a display backend
    from .visualization import Visualizer

    visualizer = Visualizer(session)
    try:
        if args.save:
            visualizer.render_frame(args.save)
        else:
            visualizer.animate()
    finally:
        visualizer.close()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())

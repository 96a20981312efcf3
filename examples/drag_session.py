"""Replay a recorded drag gesture through the processor."""

import json
import logging
import sys
from pathlib import Path

from quadwarp.config import load_config
from quadwarp.core import WarpProcessor
from quadwarp.utils.logger import setup_logger


def main():
    """Replay pointer moves from a JSON file of [index, x, y] entries."""
    logger = setup_logger('quadwarp', logging.DEBUG)

    if len(sys.argv) < 2:
        print("Usage: python drag_session.py <gesture.json> [config.yaml]")
        sys.exit(1)

    config = load_config(sys.argv[2] if len(sys.argv) > 2 else None)
    processor = WarpProcessor(config)

    with open(sys.argv[1], 'r') as f:
        moves = json.load(f)

    reference = processor.reference_corners()
    handles = list(reference)
    frames = []

    logger.info(f"Replaying {len(moves)} pointer moves...")
    for index, x, y in moves:
        handles = processor.move_handle(handles, index, x, y)
        frame = processor.process_frame(reference, handles)
        if frame["status"] != "ok":
            logger.warning(f"Frame kept undeformed: {frame['reason']}")
        frames.append(frame)

    output_path = Path("output/drag_session.json")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(frames, f, indent=2)
    logger.info(f"Frames saved to {output_path}")


if __name__ == "__main__":
    main()

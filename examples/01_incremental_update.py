from pathlib import Path
import sys

from paramcrc.accumulator import NOT_STARTED
from paramcrc.engine import Engine
from paramcrc.presets import get_preset


if __name__ == "__main__":
    # usage: python examples/01_incremental_update.py <file> [preset name]
    path = Path(sys.argv[1])
    eng = Engine(get_preset(sys.argv[2] if len(sys.argv) > 2 else "CRC-32"))

    value = NOT_STARTED
    with path.open("rb") as f:
        while chunk := f.read(64 * 1024):
            value = eng.update_bytes(value, chunk)
    if value is NOT_STARTED:
        value = eng.calculate(b"")

    print(f"{eng.config.name}: 0x{value:0{eng.config.nbytes * 2}X}  {path}")

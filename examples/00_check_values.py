from paramcrc import presets
from paramcrc.engine import Engine


if __name__ == "__main__":
    message = b"123456789"
    for cfg in presets.PRESETS:
        value = Engine(cfg).calculate(message)
        print(f"{cfg.name:20s} 0x{value:0{cfg.nbytes * 2}X}")

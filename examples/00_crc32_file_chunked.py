from pathlib import Path
import sys

from crcforge.engine.modules.table import TableCrcEngine


def crc32_of_file(path: str, chunk_size: int = 4096) -> int:
    engine = TableCrcEngine(0x04C11DB7, width=32, direction="right")
    crc = 0xFFFFFFFF
    with Path(path).open("rb") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                break
            crc = engine.compute(chunk, len(chunk), crc)
    # CRC-32/ISO-HDLC final XOR is up to the caller
    return crc ^ 0xFFFFFFFF


if __name__ == "__main__":
    path = sys.argv[1] if len(sys.argv) > 1 else __file__
    print(f"{path}: CRC-32 {crc32_of_file(path):08X}")

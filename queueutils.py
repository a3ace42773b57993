import sys
import logging
from typing import Optional

logger = logging.getLogger(__name__)

ENCODING = 'utf-8'
TERMINATOR = b'\x00'


def encodable(value: str) -> bool:
    ''' whether value survives encoding for copy_out '''

    try:
        value.encode(ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def copy_out(value: str, buffer: bytearray, capacity: int) -> int:
    ''' copy at most capacity-1 bytes of value into buffer, then terminate '''

    assert 0 < capacity <= len(buffer)

    encoded = value.encode(ENCODING)
    data = encoded[:capacity - 1]
    buffer[:len(data) + 1] = data + TERMINATOR

    if len(data) < len(encoded):
        logger.debug(f'copy_out:truncated {len(encoded)} to {len(data)} bytes')
    return len(data)


def setup_logging(filename: Optional[str] = None, level: int = logging.DEBUG,
                  stream_level: int = logging.INFO) -> logging.Logger:
    ''' configure the root logger: file output plus stdout, or stderr only '''

    if filename is None:
        logging.basicConfig(level=level, force=True)
        return logging.getLogger()

    logging.basicConfig(filename=filename, level=level, force=True)
    root = logging.getLogger()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(stream_level)
    root.addHandler(handler)
    return root

VMAJOR = 1
VMINOR = 0

CELL_SIZE_MIN = 2
CELL_SIZE_MAX = 50
CELL_SIZE_DEFAULT = 10

META_CELLS = 2                  # version cell + length cell
MAX_PROGRAM_LENGTH = 0xFFFFFF   # length cell holds 24 bits

CHANNELS = 'RGB'
OPAQUE = 0xFF

SOURCE_SUFFIX = '.plk'
IMAGE_SUFFIX = '.png'

# patterns.py
#
# Synthetic inputs with known symbol distributions, for experiments.

import os

import numpy as np


def repeated_byte(size: int, value: int = 1) -> bytes:
    """A single byte value repeated."""
    return bytes([value]) * size


def repeating_pattern(size: int, pattern: bytes = bytes([1, 2, 3])) -> bytes:
    if not pattern:
        raise ValueError("Pattern must not be empty")
    # repeat pattern enough times then trim to exact size
    return (pattern * ((size // len(pattern)) + 1))[:size]


def growing_pattern(size: int) -> bytes:
    """
    Groups [0], [0, 1], [0, 1, 2], ... up to [0, ..., 255], then starting again.
    Low byte values are far more frequent than high ones.
    """
    evolving = bytearray()
    group = 1
    while len(evolving) < size:
        evolving.extend(bytes(range(group)))
        group += 1
        if group > 256:
            group = 1
    return bytes(evolving[:size])


def full_alphabet(size: int) -> bytes:
    """Every byte value in turn, so the distribution is uniform."""
    return bytes(i % 256 for i in range(size))


def random_bytes(size: int, seed: int = 42) -> bytes:
    rng = np.random.default_rng(seed)
    return rng.integers(0, 256, size=size, dtype=np.uint8).tobytes()


PATTERN_GENERATORS = {
    "ones": repeated_byte,
    "pattern123": repeating_pattern,
    "growing_pattern": growing_pattern,
    "full_alphabet": full_alphabet,
    "random": random_bytes,
}


def generate_pattern_files(output_folder: str, size: int = 1000) -> list:
    """
    Write one file per generator into output_folder.

    Returns:
        list: The written file paths.
    """
    if size < 0:
        raise ValueError("Size must be non-negative")
    if not os.path.exists(output_folder):
        os.makedirs(output_folder)
    paths = []
    for name, generator in PATTERN_GENERATORS.items():
        path = os.path.join(output_folder, f"{name}.bin")
        with open(path, 'wb') as f:
            f.write(generator(size))
        paths.append(path)
    return paths

"""Disk Fragmenter: compact files on a disk and compute checksums."""

from __future__ import annotations

from dataclasses import dataclass, field

from aoc2024.cast import to_int


@dataclass
class DiskMap:
    """Block layout of a disk; each entry is a file id, free blocks hold 0."""

    files: list[int] = field(default_factory=list)

    @classmethod
    def from_blocks(cls, blocks: list[int]) -> DiskMap:
        """Expand a dense map of alternating file and free lengths."""
        files: list[int] = []
        file_id = 0
        for index, length in enumerate(blocks):
            if index % 2:
                files.extend([0] * length)
            else:
                files.extend([file_id] * length)
                file_id += 1
        return cls(files)

    def compact(self, idx_shift: int) -> None:
        """Move single blocks from the end into free blocks from ``idx_shift`` on."""
        files = self.files
        left, right = idx_shift, len(files) - 1
        while left < right:
            while left < right and files[left] != 0:
                left += 1
            while left < right and files[right] == 0:
                right -= 1
            if left < right:
                files[left], files[right] = files[right], files[left]

    def sort_files(self, idx_shift: int) -> None:
        """Move whole files, highest id first, into the leftmost free span that fits."""
        files = self.files
        for file_id in range(max(files, default=0), 0, -1):
            try:
                start = files.index(file_id, idx_shift)
            except ValueError:
                continue
            end = len(files) - 1 - files[::-1].index(file_id)
            length = end - start + 1

            space_start, space_length = -1, 0
            for i in range(idx_shift, start):
                if files[i] == 0:
                    if space_start == -1:
                        space_start = i
                    space_length += 1
                    if space_length >= length:
                        break
                else:
                    space_start, space_length = -1, 0

            if space_start != -1 and space_length >= length:
                files[space_start : space_start + length] = [file_id] * length
                files[start : end + 1] = [0] * length

    def checksum(self) -> int:
        """Sum of block position times file id."""
        return sum(position * file_id for position, file_id in enumerate(self.files))


def parse_input(text: str) -> list[int]:
    """Return the digits of the dense disk map."""
    return [to_int(char) for char in text.rstrip("\n")]


def part1(text: str) -> int:
    """Checksum after moving blocks one at a time into the leftmost free space."""
    data = parse_input(text)
    fwd, bwd, position, result = 0, len(data) - 1, 0, 0
    while fwd <= bwd:
        if data[fwd] <= 0:
            fwd += 1
        elif fwd % 2 == 0:
            result += (fwd // 2) * position
            position += 1
            data[fwd] -= 1
        elif data[bwd] <= 0:
            bwd -= 1
        elif bwd % 2 == 0:
            result += (bwd // 2) * position
            position += 1
            data[bwd] -= 1
            data[fwd] -= 1
        else:
            data[bwd] = 0
            bwd -= 1
    return result


def part2(text: str) -> int:
    """Checksum after moving whole files into the leftmost free span."""
    data = parse_input(text)
    disk = DiskMap.from_blocks(data)
    disk.sort_files(data[0])
    return disk.checksum()
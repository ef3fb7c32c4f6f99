"""
Input ordering.

Text and file inputs are collected separately by the argument parser,
each tagged with its origin index. The resolver merges the two runs
back into the order the caller wrote them.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.exceptions import InputOrderError
from ..core.models.inputs import HashInput, InputKind

TEXT_PARAM = "text"
FILE_PARAM = "file"


def _check_ascending(run: Sequence[tuple[int, str]], kind: InputKind) -> None:
    previous = -1
    for index, _ in run:
        if index < 0:
            raise InputOrderError(f"Negative origin index for {kind.value} input", index=index)
        if index <= previous:
            raise InputOrderError(
                f"{kind.value} inputs are not in ascending origin order", index=index
            )
        previous = index


def merge_by_index(
    texts: Sequence[tuple[int, str]],
    files: Sequence[tuple[int, str]],
) -> list[HashInput]:
    """
    Merge index-tagged text and file inputs into one ordered sequence.

    Args:
        texts: (origin index, literal text) pairs, ascending by index
        files: (origin index, file path) pairs, ascending by index

    Returns:
        Inputs ordered by origin index

    Raises:
        InputOrderError: If a run is not strictly ascending or an index
            appears in both runs
    """
    _check_ascending(texts, InputKind.TEXT)
    _check_ascending(files, InputKind.FILE)

    merged: list[HashInput] = []
    i = j = 0
    while i < len(texts) and j < len(files):
        text_index, text = texts[i]
        file_index, path = files[j]
        if text_index == file_index:
            raise InputOrderError(
                "Text and file inputs share an origin index", index=text_index
            )
        if text_index < file_index:
            merged.append(HashInput.text(text, text_index))
            i += 1
        else:
            merged.append(HashInput.file(path, file_index))
            j += 1

    merged.extend(HashInput.text(text, index) for index, text in texts[i:])
    merged.extend(HashInput.file(path, index) for index, path in files[j:])
    return merged


def resolve_inputs(
    order: Sequence[str],
    texts: Sequence[str],
    files: Sequence[str],
) -> list[HashInput]:
    """
    Rebuild the caller's input order from the parser's occurrence log.

    Args:
        order: Parameter names in the order the parser saw them; names
            other than 'text' and 'file' are ignored
        texts: Values of every --text occurrence, in occurrence order
        files: Values of every --file occurrence, in occurrence order

    Returns:
        Inputs ordered as given on the command line

    Raises:
        InputOrderError: If the occurrence log and the values disagree
    """
    text_indices: list[int] = []
    file_indices: list[int] = []
    position = 0
    for name in order:
        if name == TEXT_PARAM:
            text_indices.append(position)
        elif name == FILE_PARAM:
            file_indices.append(position)
        else:
            continue
        position += 1

    if len(text_indices) != len(texts) or len(file_indices) != len(files):
        raise InputOrderError(
            f"Occurrence log lists {len(text_indices)} text and {len(file_indices)} file "
            f"inputs, but {len(texts)} and {len(files)} values were parsed"
        )

    return merge_by_index(
        list(zip(text_indices, texts, strict=True)),
        list(zip(file_indices, files, strict=True)),
    )

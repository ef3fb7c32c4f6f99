"""
Digest service.

Drives a run: turns each ordered input into bytes, feeds the engine in
one-shot or incremental mode, and yields a report for every digest that
should be shown.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator

from ..core.interfaces.logger import ILogger
from ..core.interfaces.sources import IByteSource
from ..core.models.digest import DigestMode, DigestOptions, DigestReport
from ..core.models.inputs import HashInput, InputKind
from ..hashing.engine import DigestState, digest_oneshot
from ..hashing.hexcodec import decode_hex_literals
from ..hashing.registry import HashAlgorithmRegistry
from .logging import NullLogger


class DigestService:
    """
    Computes digests over an ordered sequence of inputs.

    Errors (hex decoding, unreadable files) propagate to the caller on
    the input that caused them; no report is produced for that input.
    """

    def __init__(
        self,
        source: IByteSource,
        registry: HashAlgorithmRegistry | None = None,
        logger: ILogger | None = None,
    ) -> None:
        self._source = source
        self._registry = registry or HashAlgorithmRegistry()
        self._logger = logger or NullLogger()

    def load_bytes(self, entry: HashInput, hex_mode: bool = False) -> bytes:
        """
        Produce the bytes an input contributes to the digest.

        Text inputs are UTF-8 encoded, keeping the raw bytes of undecodable
        arguments; file inputs are read whole. In hex mode the text (or file
        content read as UTF-8) is decoded from ``0xNN`` literals instead.
        """
        if entry.kind is InputKind.TEXT:
            if hex_mode:
                return decode_hex_literals(entry.value)
            # Undecodable argv bytes arrive surrogate-escaped; hash the original bytes.
            return os.fsencode(entry.value)

        if hex_mode:
            return decode_hex_literals(self._source.read_text(entry.value))
        return self._source.read_bytes(entry.value)

    def run(self, inputs: Iterable[HashInput], options: DigestOptions) -> Iterator[DigestReport]:
        """
        Digest ``inputs`` according to ``options``.

        One-shot mode yields one report per input. Incremental mode yields
        a single report after the last input, describing that input and
        carrying the digest of the full stream; with ``progressive`` it
        also yields the running digest after every earlier input.
        """
        if options.mode is DigestMode.UPDATE:
            yield from self._run_incremental(inputs, options)
        else:
            yield from self._run_oneshot(inputs, options)

    def _run_oneshot(
        self, inputs: Iterable[HashInput], options: DigestOptions
    ) -> Iterator[DigestReport]:
        for entry in inputs:
            data = self.load_bytes(entry, options.hex)
            self._logger.debug(
                "compute %s input #%d (%d bytes) with %s",
                entry.kind.value,
                entry.index,
                len(data),
                options.algorithm.value,
            )
            yield DigestReport(
                entry=entry,
                algorithm=options.algorithm,
                mode=DigestMode.COMPUTE,
                digest=digest_oneshot(data, options.algorithm, self._registry),
            )

    def _run_incremental(
        self, inputs: Iterable[HashInput], options: DigestOptions
    ) -> Iterator[DigestReport]:
        state = DigestState(options.algorithm, self._registry)
        last: HashInput | None = None

        for entry in inputs:
            if last is not None and options.progressive:
                yield self._update_report(last, options, state.peek(), final=False)
            data = self.load_bytes(entry, options.hex)
            state.update(data)
            self._logger.debug(
                "update with %s input #%d (%d bytes, %d total)",
                entry.kind.value,
                entry.index,
                len(data),
                state.bytes_seen,
            )
            last = entry

        if last is None:
            self._logger.debug("no inputs; nothing to finalize")
            return

        yield self._update_report(last, options, state.finalize(), final=True)

    @staticmethod
    def _update_report(
        entry: HashInput, options: DigestOptions, digest: str, final: bool
    ) -> DigestReport:
        return DigestReport(
            entry=entry,
            algorithm=options.algorithm,
            mode=DigestMode.UPDATE,
            digest=digest,
            final=final,
        )

"""Arguments provider: writes a log event's arguments as JSON fields.

Arguments that satisfy ``StructuredArgument`` are written through their
own ``write_to``. Other (plain) arguments are omitted unless
``include_non_structured_arguments`` is set; then each one becomes a
string field named ``non_structured_arguments_field_prefix`` plus the
argument index (e.g. ``arg0``), optionally renamed through the decoded
field mapping.

If ``field_name`` is set, all argument fields are nested in an object
under that name, opened only once the first field is about to be
written. Otherwise they are written inline in the current object.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
import logging
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from logfields.core.arguments.protocol import StructuredArgument
from logfields.core.decoders.protocol import MappingDecoder
from logfields.core.fieldnames import FieldNames
from logfields.core.json.protocol import JsonWriter
from logfields.core.status.protocol import StatusReporter
from logfields.core.status.reporters import LoggingStatusReporter

logger = logging.getLogger(__name__)

DEFAULT_FIELD_PREFIX = "arg"

_EMPTY_MAPPING: Mapping[str, str] = MappingProxyType({})


class ArgumentsProviderConfig(BaseModel):
    """Options for ``ArgumentsJsonProvider``. Immutable once built."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    include_structured_arguments: bool = True
    include_non_structured_arguments: bool = False
    non_structured_arguments_field_prefix: str = DEFAULT_FIELD_PREFIX
    non_structured_arguments_fields_mapping: str | None = Field(
        default=None,
        description="Raw mapping text from default names (arg0) to replacement names",
    )
    field_name: str | None = Field(
        default=None, description="Wrapper object field name (None = write inline)"
    )


def resolve_fields_mapping(
    raw_mapping: str | None, decoder: MappingDecoder | None
) -> Mapping[str, str] | None:
    """Decode mapping text into a read-only table.

    Args:
        raw_mapping: Raw mapping text, if configured
        decoder: Decoder for the text, if available

    Returns:
        Read-only mapping, or None when either input is missing

    Raises:
        MappingDecodeError: If the decoder rejects the text
    """
    if raw_mapping is None or decoder is None:
        return None
    return MappingProxyType(dict(decoder.decode(raw_mapping)))


class ArgumentsJsonProvider:
    """Writes log arguments into an open JSON object.

    The configuration is immutable; ``with_config`` and
    ``with_field_names`` return new providers. The decoded field mapping
    is replaced by a single reference swap, so ``write_to`` can run
    concurrently with a late ``set_decoder`` and sees either the old or
    the new table in full.

    Example:
        provider = ArgumentsJsonProvider(
            ArgumentsProviderConfig(include_non_structured_arguments=True)
        )
        writer.write_start_object()
        provider.write_to(writer, ["x", kv("user", "bob")])
        writer.write_end_object()
        # {"arg0":"x","user":"bob"}
    """

    def __init__(
        self,
        config: ArgumentsProviderConfig | None = None,
        *,
        decoder: MappingDecoder | None = None,
        reporter: StatusReporter | None = None,
    ) -> None:
        self._config = config or ArgumentsProviderConfig()
        self._decoder = decoder
        self._reporter: StatusReporter = reporter or LoggingStatusReporter()
        self._fields_mapping: Mapping[str, str] = _EMPTY_MAPPING
        self._mapping_resolved = False
        self.configure_name_mapping(self._config.non_structured_arguments_fields_mapping, decoder)

    # =========================================================================
    # Event output
    # =========================================================================

    def write_to(self, writer: JsonWriter, arguments: Sequence[Any] | None) -> None:
        """Write argument fields for one log event.

        Args:
            writer: Writer positioned inside an open object scope
            arguments: The event's arguments, in call order (may be None)

        Raises:
            Exception: Whatever the writer or a structured argument raises;
                fields written before the failure stay written.
        """
        config = self._config
        include_structured = config.include_structured_arguments
        include_non_structured = config.include_non_structured_arguments
        if not include_structured and not include_non_structured:
            return

        if not arguments:
            return

        field_name = config.field_name
        prefix = config.non_structured_arguments_field_prefix
        fields_mapping = self._fields_mapping
        wrapper_open = False

        for index, argument in enumerate(arguments):
            if _is_structured(argument):
                if not include_structured:
                    continue
                if not wrapper_open and field_name is not None:
                    writer.write_object_field_start(field_name)
                    wrapper_open = True
                argument.write_to(writer)
            elif include_non_structured:
                if not wrapper_open and field_name is not None:
                    writer.write_object_field_start(field_name)
                    wrapper_open = True
                default_name = f"{prefix}{index}"
                writer.write_string_field(
                    fields_mapping.get(default_name, default_name), str(argument)
                )

        if wrapper_open:
            writer.write_end_object()

    # =========================================================================
    # Configuration
    # =========================================================================

    def configure_name_mapping(
        self, raw_mapping: str | None, decoder: MappingDecoder | None
    ) -> None:
        """Decode and install the non-structured field-name mapping.

        Leaves the mapping untouched when either input is missing. A
        successful decode replaces the whole table. A failed decode is
        reported as an ERROR status and keeps the last good table
        (empty if none was ever decoded); it never raises, whatever the
        decoder raises.

        Args:
            raw_mapping: Raw mapping text
            decoder: Decoder for the text
        """
        try:
            resolved = resolve_fields_mapping(raw_mapping, decoder)
        except Exception as e:
            self._reporter.add_error(
                f"Failed to parse mapped fields [{raw_mapping}]",
                error=e,
                origin=type(self).__name__,
            )
            return

        if resolved is None:
            return

        self._fields_mapping = resolved
        self._mapping_resolved = True
        logger.debug(f"Resolved {len(resolved)} non-structured argument field mapping(s)")

    def set_decoder(self, decoder: MappingDecoder) -> None:
        """Install a decoder that became available after construction.

        Triggers decoding of the configured mapping text. Call during setup,
        before events are written.
        """
        self._decoder = decoder
        self.configure_name_mapping(self._config.non_structured_arguments_fields_mapping, decoder)

    def with_config(self, **updates: Any) -> ArgumentsJsonProvider:
        """Return a new provider with updated options.

        Args:
            **updates: ``ArgumentsProviderConfig`` fields to replace

        The decoded mapping is carried over when the mapping text is
        unchanged, so a bad mapping is not decoded and reported again.

        Returns:
            New provider sharing this provider's decoder and reporter

        Raises:
            ValidationError: If an update is not a valid option
        """
        config = ArgumentsProviderConfig.model_validate({**self._config.model_dump(), **updates})
        raw_mapping = config.non_structured_arguments_fields_mapping

        provider = ArgumentsJsonProvider(config, reporter=self._reporter)
        provider._decoder = self._decoder
        if raw_mapping == self._config.non_structured_arguments_fields_mapping:
            provider._fields_mapping = self._fields_mapping
            provider._mapping_resolved = self._mapping_resolved
        else:
            provider.configure_name_mapping(raw_mapping, self._decoder)
        return provider

    def with_field_names(self, field_names: FieldNames) -> ArgumentsJsonProvider:
        """Return a new provider using ``field_names.arguments`` as wrapper name."""
        return self.with_config(field_name=field_names.arguments)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> ArgumentsProviderConfig:
        return self._config

    @property
    def field_name(self) -> str | None:
        return self._config.field_name

    @property
    def decoder(self) -> MappingDecoder | None:
        return self._decoder

    @property
    def fields_mapping(self) -> Mapping[str, str]:
        """Current read-only field-name mapping."""
        return self._fields_mapping

    @property
    def mapping_resolved(self) -> bool:
        """True once a mapping has been decoded successfully."""
        return self._mapping_resolved


def _is_structured(argument: Any) -> bool:
    # Classes expose write_to as an unbound function; treat them as plain
    return isinstance(argument, StructuredArgument) and not isinstance(argument, type)

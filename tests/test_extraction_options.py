"""Tests for extraction.options: validation and plugin-style construction."""

from pathlib import Path

import pytest

from intlextract.extraction import ExtractionOptions


class TestDefaults:
    """ExtractionOptions() is a no-op configuration."""

    def test_defaults(self) -> None:
        options = ExtractionOptions()
        assert options.module_source_name == "react-intl"
        assert options.messages_dir is None
        assert options.enforce_descriptions is False
        assert options.generate_message_ids is False
        assert options.remove_extracted_data is False

    def test_frozen(self) -> None:
        options = ExtractionOptions()
        with pytest.raises(AttributeError):
            options.module_source_name = "other"  # type: ignore[misc]


class TestValidation:
    """__post_init__ checks."""

    def test_messages_dir_string_becomes_path(self) -> None:
        assert ExtractionOptions(messages_dir="build/messages").messages_dir == Path(  # type: ignore[arg-type]
            "build/messages"
        )

    def test_messages_dir_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="messages_dir"):
            ExtractionOptions(messages_dir=3)  # type: ignore[arg-type]

    def test_empty_module_name(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            ExtractionOptions(module_source_name="")

    def test_module_name_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="module_source_name"):
            ExtractionOptions(module_source_name=None)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "flag", ["enforce_descriptions", "generate_message_ids", "remove_extracted_data"]
    )
    def test_flags_must_be_bool(self, flag: str) -> None:
        with pytest.raises(TypeError, match=flag):
            ExtractionOptions(**{flag: 1})  # type: ignore[arg-type]


class TestFromMapping:
    """Plugin-style option objects."""

    def test_camel_case_keys(self) -> None:
        options = ExtractionOptions.from_mapping(
            {
                "moduleSourceName": "@my/intl",
                "messagesDir": "out",
                "enforceDescriptions": True,
                "generateMessageIds": True,
                "removeExtractedData": True,
            }
        )
        assert options == ExtractionOptions(
            module_source_name="@my/intl",
            messages_dir=Path("out"),
            enforce_descriptions=True,
            generate_message_ids=True,
            remove_extracted_data=True,
        )

    def test_snake_case_keys(self) -> None:
        options = ExtractionOptions.from_mapping({"enforce_descriptions": True})
        assert options.enforce_descriptions is True

    def test_empty_mapping(self) -> None:
        assert ExtractionOptions.from_mapping({}) == ExtractionOptions()

    def test_unknown_key(self) -> None:
        with pytest.raises(ValueError, match="Unknown extraction option: 'messageDir'"):
            ExtractionOptions.from_mapping({"messageDir": "x"})

"""Tests for building the environment catalog."""

import logging
from typing import Any

import pytest
from pydantic import ValidationError

from fabric8_kube.domains.environments.catalog import (
    build_catalog,
    environment_from_document,
    ordered_environments,
    parse_environment_document,
)
from fabric8_kube.domains.environments.models import Environment
from fabric8_kube.utils.errors import (
    MalformedEntryError,
    MissingFieldError,
    MissingProviderLabelError,
)


class TestParseEnvironmentDocument:
    """Tests for the field: value line parser."""

    def test_parses_fields(self) -> None:
        fields = parse_environment_document("run", "name: Run\nnamespace: my-run\norder: 1")

        assert fields == {"name": "Run", "namespace": "my-run", "order": "1"}

    def test_value_is_remainder_after_first_colon(self) -> None:
        """Test values keep any further colons and are trimmed."""
        fields = parse_environment_document("run", "console:   https://console.example:8443/  ")

        assert fields == {"console": "https://console.example:8443/"}

    def test_blank_lines_skipped(self) -> None:
        fields = parse_environment_document("run", "\nname: Run\r\n\n  \nnamespace: my-run\n")

        assert fields == {"name": "Run", "namespace": "my-run"}

    def test_missing_colon(self) -> None:
        with pytest.raises(MalformedEntryError) as exc_info:
            parse_environment_document("run", "name: Run\nnamespace my-run\norder: 1")

        assert exc_info.value.key == "run"
        assert exc_info.value.line == "namespace my-run"

    def test_empty_field_name(self) -> None:
        with pytest.raises(MalformedEntryError):
            parse_environment_document("run", ": my-run")


class TestEnvironmentFromDocument:
    """Tests for turning one ConfigMap entry into an Environment."""

    def test_builds_environment(self) -> None:
        env = environment_from_document("run", "name: Run\nnamespace: my-run\norder: 1")

        assert env == Environment(name="Run", namespace="my-run", order=1)

    def test_unknown_fields_ignored(self) -> None:
        env = environment_from_document(
            "run", "name: Run\ncluster: starter\nnamespace: my-run\norder: 1"
        )

        assert env.namespace == "my-run"

    @pytest.mark.parametrize(
        ("document", "field"),
        [
            ("name: Run\nns: my-run\norder: 1", "namespace"),
            ("namespace: my-run\norder: 1", "name"),
            ("name: Run\nnamespace: my-run", "order"),
        ],
    )
    def test_missing_required_field(self, document: str, field: str) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            environment_from_document("run", document)

        assert exc_info.value.field == field
        assert exc_info.value.key == "run"

    def test_order_must_be_integer(self) -> None:
        with pytest.raises(MalformedEntryError) as exc_info:
            environment_from_document("run", "name: Run\nnamespace: my-run\norder: first")

        assert "order" in str(exc_info.value)

    def test_environment_is_immutable(self) -> None:
        env = environment_from_document("run", "name: Run\nnamespace: my-run\norder: 1")

        with pytest.raises(ValidationError):
            env.namespace = "other"  # type: ignore[misc]


class TestBuildCatalog:
    """Tests for build_catalog."""

    def test_one_environment_per_entry(self, config_map_factory: Any) -> None:
        """Test the catalog has an entry per data item, keyed by its name."""
        catalog = build_catalog(config_map_factory())

        assert len(catalog) == 2
        for key, env in catalog.items():
            assert env.name == key
        assert catalog["run"].namespace == "my-run"
        assert catalog["stage"].order == 0

    def test_keyed_by_parsed_name(self, config_map_factory: Any) -> None:
        """Test the parsed name, not the data key, identifies the environment."""
        record = config_map_factory(
            data={
                "run": "name: Run\nnamespace: my-run\norder: 1",
                "stage": "name: Stage\nnamespace: my-stage\norder: 0",
            }
        )

        catalog = build_catalog(record)

        assert set(catalog) == {"Run", "Stage"}
        assert catalog["Stage"].namespace == "my-stage"

    def test_empty_data(self, config_map_factory: Any) -> None:
        catalog = build_catalog(config_map_factory(data={}))

        assert len(catalog) == 0

    @pytest.mark.parametrize(
        "labels",
        [{}, {"provider": "openshift"}, {"group": "fabric8"}],
    )
    def test_requires_provider_label(self, config_map_factory: Any, labels: dict) -> None:
        with pytest.raises(MissingProviderLabelError):
            build_catalog(config_map_factory(labels=labels))

    def test_provider_checked_before_data(self, config_map_factory: Any) -> None:
        """Test a missing label fails even when the data is also broken."""
        record = config_map_factory(labels={}, data={"run": "garbage"})

        with pytest.raises(MissingProviderLabelError):
            build_catalog(record)

    def test_malformed_entry(self, config_map_factory: Any) -> None:
        record = config_map_factory(data={"run": "name: Run\nnamespace my-run\norder: 1"})

        with pytest.raises(MalformedEntryError):
            build_catalog(record)

    def test_missing_namespace(self, config_map_factory: Any) -> None:
        record = config_map_factory(data={"run": "name: Run\nns: my-run\norder: 1"})

        with pytest.raises(MissingFieldError):
            build_catalog(record)

    def test_duplicate_name_last_wins(
        self, config_map_factory: Any, caplog: pytest.LogCaptureFixture
    ) -> None:
        record = config_map_factory(
            data={
                "run": "name: run\nnamespace: first-run\norder: 1",
                "run-again": "name: run\nnamespace: second-run\norder: 2",
            }
        )

        with caplog.at_level(logging.WARNING):
            catalog = build_catalog(record)

        assert len(catalog) == 1
        assert catalog["run"].namespace == "second-run"
        assert "defined more than once" in caplog.text

    def test_catalog_is_read_only(self, config_map_factory: Any) -> None:
        catalog = build_catalog(config_map_factory())

        with pytest.raises(TypeError):
            catalog["prod"] = Environment(  # type: ignore[index]
                name="prod", namespace="my-prod", order=2
            )


def test_ordered_environments(config_map_factory: Any) -> None:
    """Test environments sort by order, then name."""
    record = config_map_factory(
        data={
            "run": "name: run\nnamespace: my-run\norder: 1",
            "stage": "name: stage\nnamespace: my-stage\norder: 0",
            "test": "name: test\nnamespace: my-test\norder: 1",
        }
    )

    names = [env.name for env in ordered_environments(build_catalog(record))]

    assert names == ["stage", "run", "test"]

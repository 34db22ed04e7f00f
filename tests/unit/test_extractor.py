"""Tests for image reference parsing and record extraction."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from kubeimg.models.resources import ContainerImage, ResourceKind, ResourceRecord
from kubeimg.snapshot.extractor import extract_record, parse_image_reference
from tests.factories import make_cronjob, make_service, make_workload

_SEGMENT = st.text(alphabet=st.characters(exclude_characters="/:", exclude_categories=("Cs",)), min_size=1)


# ---------------------------------------------------------------------------
# parse_image_reference
# ---------------------------------------------------------------------------


class TestParseImageReference:
    @pytest.mark.parametrize(
        ("reference", "image", "version"),
        [
            ("nginx", "nginx", ""),
            ("nginx:1.25", "nginx", "1.25"),
            ("library/nginx:1.25-alpine", "nginx", "1.25-alpine"),
            ("ghcr.io/acme/team/api-server:v1.2.3", "api-server", "v1.2.3"),
            ("quay.io/prometheus/node-exporter", "node-exporter", ""),
            ("busybox@sha256:abc123", "busybox@sha256", "abc123"),
            ("registry:5000/app:v1", "app", "5000/app:v1"),
            ("", "", ""),
            (":", "", ""),
            (":v1", "", "v1"),
            ("repo/", "", ""),
        ],
    )
    def test_known_references(self, reference: str, image: str, version: str) -> None:
        assert parse_image_reference(reference) == ContainerImage(image=image, version=version)

    @given(path=st.lists(_SEGMENT, max_size=4), name=_SEGMENT, tag=_SEGMENT)
    def test_path_name_tag(self, path: list[str], name: str, tag: str) -> None:
        reference = "/".join([*path, f"{name}:{tag}"])
        parsed = parse_image_reference(reference)
        assert parsed.image == name
        assert parsed.version == tag

    @given(reference=st.text(alphabet=st.characters(exclude_characters=":", exclude_categories=("Cs",))))
    def test_no_colon_means_empty_version(self, reference: str) -> None:
        assert parse_image_reference(reference).version == ""

    @given(reference=st.text(alphabet=st.characters(exclude_characters="/", exclude_categories=("Cs",))))
    def test_no_slash_keeps_text_before_first_colon(self, reference: str) -> None:
        assert parse_image_reference(reference).image == reference.split(":", 1)[0]


# ---------------------------------------------------------------------------
# extract_record
# ---------------------------------------------------------------------------


class TestExtractRecord:
    def test_deployment_containers_in_declared_order(self) -> None:
        obj = make_workload("api", ["ghcr.io/acme/api-server:v1.2.3", "envoyproxy/envoy:v1.29.0"])
        record = extract_record(ResourceKind.DEPLOYMENT, obj)
        assert record == ResourceRecord(
            kind="Deployment",
            name="api",
            images=("api-server", "envoy"),
            versions=("v1.2.3", "v1.29.0"),
        )

    def test_cronjob_uses_job_template(self) -> None:
        obj = make_cronjob("nightly-backup", ["acme/backup:2024.05"])
        record = extract_record(ResourceKind.CRON_JOB, obj)
        assert record.images == ("backup",)
        assert record.versions == ("2024.05",)

    def test_service_has_no_images(self) -> None:
        record = extract_record(ResourceKind.SERVICE, make_service("frontend"))
        assert record == ResourceRecord(kind="Service", name="frontend")
        assert record.images == ()
        assert record.versions == ()

    def test_service_ignores_containers_if_present(self) -> None:
        obj = make_workload("odd", ["nginx:1"])
        assert extract_record(ResourceKind.SERVICE, obj).images == ()

    def test_missing_template_means_no_containers(self) -> None:
        obj = {"metadata": {"name": "bare"}, "spec": {}}
        record = extract_record(ResourceKind.STATEFUL_SET, obj)
        assert record.images == ()
        assert record.versions == ()

    def test_non_mapping_template_is_ignored(self) -> None:
        obj = {"metadata": {"name": "broken"}, "spec": {"template": "nope"}}
        assert extract_record(ResourceKind.DAEMON_SET, obj).images == ()

    def test_container_without_image(self) -> None:
        obj = make_workload("sidecar", ["nginx:1"])
        obj["spec"]["template"]["spec"]["containers"].append({"name": "no-image"})
        record = extract_record(ResourceKind.DEPLOYMENT, obj)
        assert record.images == ("nginx", "")
        assert record.versions == ("1", "")

    def test_missing_metadata_name(self) -> None:
        record = extract_record(ResourceKind.JOB, {"spec": {}})
        assert record.name == ""

    def test_images_and_versions_always_same_length(self) -> None:
        obj = make_workload("multi", ["a", "b:1", "c/d:2", ""])
        record = extract_record(ResourceKind.DEPLOYMENT, obj)
        assert len(record.images) == len(record.versions) == 4
        assert [c.image for c in record.containers] == list(record.images)


class TestResourceRecord:
    def test_mismatched_lengths_rejected(self) -> None:
        with pytest.raises(ValueError, match="2 images but 1 versions"):
            ResourceRecord(kind="Deployment", name="api", images=("a", "b"), versions=("1",))

    def test_cells_join_with_commas(self) -> None:
        record = ResourceRecord(kind="Deployment", name="api", images=("a", "b"), versions=("1", "2"))
        assert record.cells() == ["Deployment", "api", "a,b", "1,2"]
        assert record.key == ("Deployment", "api")

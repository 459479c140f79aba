from __future__ import annotations

import pytest

from gradlesync.core.errors import DescriptorValidationError
from gradlesync.core.models import Library, ManifestTemplates, VersionDescriptor
from gradlesync.core.settings import DEFAULT_EXTRA_DEPENDENCIES
from gradlesync.rendering.engine import ManifestRenderer, load_default_templates

EXPECTED_BUILD = """plugins {
    id 'java'
}

java {
    toolchain {
        languageVersion = JavaLanguageVersion.of(17)
    }
}

repositories {
    mavenCentral()
    maven {
        name = 'Mojang'
        url = 'https://libraries.minecraft.net/'
    }
}

dependencies {
    implementation 'ca.weblite:java-objc-bridge:1.1'
    implementation 'com.google.code.findbugs:jsr305:3.0.2'
    implementation 'org.example:foo:1.0'
    implementation 'org.jetbrains:annotations:24.1.0'
}
"""

EXPECTED_SETTINGS = """plugins {
    id 'org.gradle.toolchains.foojay-resolver-convention' version '0.8.0'
}
"""

BARE_TEMPLATES = ManifestTemplates(
    build_gradle="java={{ java_version }}\n{{ dependencies }}\n",
    settings_gradle="static {{ not_rendered }}\n",
)


def _dependency_lines(build: bytes) -> list[str]:
    return [
        line.strip() for line in build.decode("utf-8").splitlines() if "implementation" in line
    ]


def test_render_matches_reference_output(version: VersionDescriptor) -> None:
    rendered = ManifestRenderer().render(version)

    assert rendered.build_gradle.decode("utf-8") == EXPECTED_BUILD
    assert rendered.settings_gradle.decode("utf-8") == EXPECTED_SETTINGS


def test_render_is_deterministic(version: VersionDescriptor) -> None:
    renderer = ManifestRenderer()

    assert renderer.render(version) == renderer.render(version)
    assert ManifestRenderer().render(version) == renderer.render(version)


def test_disallowed_library_never_rendered() -> None:
    version = VersionDescriptor(
        java_version=8,
        libraries=(
            Library(name="org.example:hidden:1.0", is_allowed=False),
            Library(name="org.example:shown:1.0"),
            Library(name="org.example:hidden:1.0", is_allowed=False),
        ),
    )

    build = ManifestRenderer().render(version).build_gradle

    assert b"org.example:hidden:1.0" not in build
    assert b"org.example:shown:1.0" in build


def test_extras_included_once_with_no_libraries() -> None:
    version = VersionDescriptor(java_version=8)

    lines = _dependency_lines(ManifestRenderer().render(version).build_gradle)

    assert lines == [
        f"implementation '{coordinate}'" for coordinate in sorted(DEFAULT_EXTRA_DEPENDENCIES)
    ]


def test_dependencies_sorted_by_code_point() -> None:
    version = VersionDescriptor(
        java_version=21,
        libraries=(Library(name="b:b:1"), Library(name="a:a:1")),
    )
    renderer = ManifestRenderer(extra_dependencies=["z:z:9"])

    assert renderer.dependency_coordinates(version) == ["a:a:1", "b:b:1", "z:z:9"]
    assert _dependency_lines(renderer.render(version).build_gradle) == [
        "implementation 'a:a:1'",
        "implementation 'b:b:1'",
        "implementation 'z:z:9'",
    ]


def test_uppercase_sorts_before_lowercase() -> None:
    version = VersionDescriptor(
        java_version=17,
        libraries=(Library(name="a:a:1"), Library(name="B:b:1")),
    )

    assert ManifestRenderer(extra_dependencies=()).dependency_coordinates(version) == [
        "B:b:1",
        "a:a:1",
    ]


def test_duplicates_survive() -> None:
    version = VersionDescriptor(
        java_version=17,
        libraries=(Library(name="a:a:1"), Library(name="a:a:1")),
    )

    assert ManifestRenderer(extra_dependencies=["a:a:1"]).dependency_coordinates(
        version
    ) == ["a:a:1", "a:a:1", "a:a:1"]


def test_missing_java_version_is_descriptor_error() -> None:
    version = VersionDescriptor(id="rd-132211", libraries=(Library(name="a:a:1"),))

    with pytest.raises(DescriptorValidationError, match="rd-132211"):
        ManifestRenderer().render(version)


def test_custom_templates_substitute_literally() -> None:
    version = VersionDescriptor(
        java_version=11,
        libraries=(Library(name="org.example:foo:1.0-SNAPSHOT"),),
    )
    renderer = ManifestRenderer(templates=BARE_TEMPLATES, extra_dependencies=["x:y:2"])

    rendered = renderer.render(version)

    assert rendered.build_gradle == (
        b"java=11\n"
        b"    implementation 'org.example:foo:1.0-SNAPSHOT'\n"
        b"    implementation 'x:y:2'\n"
    )
    assert rendered.settings_gradle == b"static {{ not_rendered }}\n"


def test_default_templates_keep_trailing_newline() -> None:
    templates = load_default_templates()

    assert templates.build_gradle.endswith("}\n")
    assert "{{ java_version }}" in templates.build_gradle
    assert "{{ dependencies }}" in templates.build_gradle
    assert templates.settings_gradle == EXPECTED_SETTINGS


def test_custom_template_block_whitespace_preserved() -> None:
    templates = ManifestTemplates(
        build_gradle="{% if java_version %}\n    java {{ java_version }}\n{% endif %}\n",
        settings_gradle="",
    )

    rendered = ManifestRenderer(templates=templates, extra_dependencies=()).render(
        VersionDescriptor(java_version=17)
    )

    assert rendered.build_gradle == b"\n    java 17\n\n"

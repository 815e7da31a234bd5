#!/usr/bin/env python3
"""
Tests for the launcher template and platform detection
"""

import pytest

from native_launchers import template
from native_launchers.errors import TemplateLoadFailure
from native_launchers.host import PlatformProfile, detect_platform
from native_launchers.template import conventional_name, load_template, render


def test_render_replaces_every_placeholder():
    print("[TEST] Testing template rendering...")

    text = "a {{IMAGE_NAME}} b {{METHOD_NAME}} c {{IMAGE_NAME}}{{METHOD_NAME}}\n"
    assert render(text, "img", "run_App") == "a img b run_App c imgrun_App\n"

    print("✓ All placeholders replaced")


def test_render_without_placeholders_is_unchanged():
    text = "int main(void) { return 0; }\n{{OTHER}} {IMAGE_NAME}\n"
    assert render(text, "img", "run_App") == text


def test_render_does_not_rescan_substituted_text():
    text = "lib={{IMAGE_NAME}} sym={{METHOD_NAME}}"
    assert render(text, "x{{METHOD_NAME}}", "run_{{IMAGE_NAME}}") == "lib=x{{METHOD_NAME}} sym=run_{{IMAGE_NAME}}"


def test_conventional_name():
    assert conventional_name("App1") == "run_App1"
    assert conventional_name("my-app.cli") == "run_my_app_cli"
    assert conventional_name("9lives") == "run_9lives"


def test_bundled_template_has_placeholders():
    text = load_template()
    assert template.IMAGE_NAME_TOKEN in text
    assert template.METHOD_NAME_TOKEN in text

    rendered = render(text, "app-image", "run_App1")
    assert '#define IMAGE_NAME "app-image"' in rendered
    assert '#define METHOD_NAME "run_App1"' in rendered
    assert "{{" not in rendered


def test_bundled_template_resolves_executable_path_per_platform():
    text = load_template()
    assert 'readlink("/proc/self/exe"' in text
    assert "GetModuleFileNameA" in text
    assert "#include <mach-o/dyld.h>" in text
    # macOS asks dyld rather than trusting argv[0]
    apple_branch = text.split("#elif defined(__APPLE__)", 1)[1].split("#else", 1)[0]
    assert "_NSGetExecutablePath(buf, &n)" in apple_branch


def test_missing_template(tmp_path):
    with pytest.raises(TemplateLoadFailure):
        load_template(tmp_path / "missing.c")


@pytest.mark.parametrize("os_name,windows,unix", [
    ("Windows", True, False),
    ("Windows 10", True, False),
    ("Linux", False, True),
    ("AIX", False, True),
    ("Darwin", False, False),
    ("Mac OS X", False, False),
])
def test_platform_from_os_name(os_name, windows, unix):
    profile = PlatformProfile.from_os_name(os_name)
    assert profile.is_windows == windows
    assert profile.is_unix == unix
    assert profile.path_separator == (";" if windows else ":")
    assert profile.executable_suffix == (".exe" if windows else "")


def test_detect_platform():
    assert detect_platform("Linux").is_unix
    assert isinstance(detect_platform(), PlatformProfile)

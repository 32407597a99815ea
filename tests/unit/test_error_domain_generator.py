"""
Tests for the error-domain enum generator.

Tests cover:
- Java NSErrorWrap, getErrorCode and explicit registration
- Generated Python wrapper: soft lookup, domain accessor, register()
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

from enumbind.core.errors import RenderError
from enumbind.core.models import EnumSpec
from enumbind.generators import ErrorDomainEnumGenerator, create_generator
from enumbind.runtime import BindingRegistry, NativeError
from enumbind.targets import JavaTarget, PythonTarget


@dataclass
class FakeNativeError:
    code: int
    domain: str = "HTTPErrorDomain"


@pytest.fixture
def http_module(http_status_spec, tmp_path: Path, load_generated):
    text = create_generator(http_status_spec, PythonTarget()).render()
    path = tmp_path / "http_status.py"
    path.write_text(text)
    return load_generated(path)


class TestJavaErrorDomainEnum:
    """Test Java rendering of error-domain enums."""

    def test_selects_error_domain_generator(self, http_status_spec):
        generator = create_generator(http_status_spec, JavaTarget())
        assert isinstance(generator, ErrorDomainEnumGenerator)

    def test_implements_error_code(self, http_status_spec):
        text = create_generator(http_status_spec, JavaTarget()).render()

        assert "public enum /*<name>*/HTTPStatus/*</name>*/ implements NSErrorCode {" in text
        assert "    OK(200L),\n    /** No such resource. */\n    NOT_FOUND(404L);" in text

    def test_domain_accessor_is_generated(self, http_status_spec):
        text = create_generator(http_status_spec, JavaTarget()).render()

        assert (
            "/*<constants>*/\n"
            "    public static String getClassDomain() {\n"
            '        return "HTTPErrorDomain";\n'
            "    }\n"
            "    /*</constants>*/"
        ) in text

    def test_wrapper_uses_soft_lookup(self, http_status_spec):
        text = create_generator(http_status_spec, JavaTarget()).render()

        assert "public static class NSErrorWrap extends NSError {" in text
        assert "return /*<name>*/HTTPStatus/*</name>*/.find(getCode());" in text
        assert "return /*<name>*/HTTPStatus/*</name>*/.getClassDomain();" in text

    def test_registration_is_explicit(self, http_status_spec):
        text = create_generator(http_status_spec, JavaTarget()).render()

        assert "public static void register() { Bro.bind(NSErrorWrap.class); }" in text
        assert "static { Bro.bind" not in text

    def test_members_and_constants_extra(self, http_status_record):
        http_status_record["members"] = "private static final int RETRIES = 3;"
        http_status_record["constantsExtra"] = 'public static final String NAME = "http";'
        spec = EnumSpec.from_record(http_status_record)

        text = create_generator(spec, JavaTarget()).render()

        assert "/*<members>*/\n    private static final int RETRIES = 3;\n    /*</members>*/" in text
        assert (
            '    }\n    public static final String NAME = "http";\n    /*</constants>*/'
        ) in text

    def test_merge_requires_mandatory_markers(self, http_status_spec):
        existing = create_generator(http_status_spec, JavaTarget()).render()
        existing = existing.replace("/*<lookup>*/", "").replace("/*</lookup>*/", "")

        with pytest.raises(RenderError, match="HTTPStatus: skeleton lacks mandatory section\\(s\\): lookup"):
            create_generator(http_status_spec, JavaTarget()).render(existing=existing)


class TestPythonErrorDomainEnum:
    """Test generated Python error-domain modules."""

    def test_wrapped_known_code(self, http_module):
        wrapper = http_module.HTTPStatusErrorWrap(FakeNativeError(code=404))

        assert wrapper.get_error_code() is http_module.HTTPStatus.NOT_FOUND
        assert wrapper.code == 404

    def test_wrapped_unknown_code_is_absent(self, http_module):
        wrapper = http_module.HTTPStatusErrorWrap(FakeNativeError(code=999))

        assert wrapper.get_error_code() is None

    def test_value_of_still_hard_fails(self, http_module):
        with pytest.raises(ValueError, match="No constant with value 999 found in com.example.net.HTTPStatus"):
            http_module.HTTPStatus.value_of(999)

    def test_class_domain(self, http_module):
        assert http_module.HTTPStatus.get_class_domain() == "HTTPErrorDomain"
        assert http_module.HTTPStatusErrorWrap.get_class_domain() == "HTTPErrorDomain"

    def test_domain_accessor_is_not_a_member(self, http_module):
        assert [m.name for m in http_module.HTTPStatus] == ["OK", "NOT_FOUND"]

    def test_register_binds_wrapper(self, http_module):
        registry = BindingRegistry()

        http_module.register(registry)
        http_module.register(registry)

        assert registry.bound(NativeError) == (http_module.HTTPStatusErrorWrap,)
        assert registry.is_bound(http_module.HTTPStatusErrorWrap)

    def test_registry_wraps_by_domain(self, http_module):
        registry = BindingRegistry()
        http_module.register(registry)

        wrapped = registry.wrap(FakeNativeError(code=200))
        foreign = registry.wrap(FakeNativeError(code=200, domain="NSCocoaErrorDomain"))

        assert isinstance(wrapped, http_module.HTTPStatusErrorWrap)
        assert wrapped.get_error_code() is http_module.HTTPStatus.OK
        assert foreign is None

    def test_members_section(self, http_status_record, tmp_path, load_generated):
        http_status_record["members"] = "def is_client_error(self) -> bool:\n    return 400 <= self.code < 500"
        spec = EnumSpec.from_record(http_status_record)
        path = tmp_path / "http_status.py"
        path.write_text(create_generator(spec, PythonTarget()).render())
        module = load_generated(path)

        assert module.HTTPStatusErrorWrap(FakeNativeError(code=404)).is_client_error() is True
        assert module.HTTPStatusErrorWrap(FakeNativeError(code=200)).is_client_error() is False

"""Tests for the form component tree and the slug control's input capability."""

import pytest

from form_slug import Container, Form, FormSlugError, SlugControl, TextInput
from tests.fixtures import FakeField, extract_settings


def test_text_input_markup():
    text = TextInput("Title", 80)
    form = Form()
    form.add_component(text, "title")
    text.set_value('Say "hi"')

    assert text.get_control() == (
        '<input type="text" name="title" id="frm-title" value="Say &#34;hi&#34;" maxlength="80">'
    )


def test_text_input_label():
    form = Form("post")
    text = form.add_text("title", "Title")

    assert text.get_label() == '<label for="frm-post-title">Title</label>'
    assert TextInput().get_label() == ""


def test_explicit_html_id_wins():
    text = TextInput().set_html_id("custom-id")
    assert text.get_html_id() == "custom-id"


def test_nested_container_ids():
    form = Form("post")
    meta = form.add_container("meta")
    text = meta.add_text("title")

    assert text.get_html_id() == "frm-post-meta-title"
    assert text.get_form() is form
    assert isinstance(meta, Container)


def test_duplicate_component_name_rejected():
    form = Form()
    form.add_text("title")
    with pytest.raises(FormSlugError):
        form.add_text("title")


def test_container_iteration_order():
    form = Form()
    first = form.add_text("a")
    second = form.add_text("b")

    assert list(form) == [first, second]
    assert len(form) == 2
    assert "a" in form


def test_none_value_becomes_empty_string():
    assert TextInput().set_value(None).get_value() == ""


class TestSlugControlCapability:
    """Slug control exposes the wrapped text input"""

    def test_value_and_id_delegate_to_input(self, form, template_factory):
        slug = form.add_component(SlugControl(template_factory, "URL", 60), "slug")
        slug.set_value("hello")

        assert slug.get_value() == "hello"
        assert slug.get_html_id() == "frm-post-slug"
        assert slug.get_form() is form
        assert 'maxlength="60"' in slug.get_control()

    def test_chained_configuration(self, form, template_factory):
        title = form.add_text("title")
        subtitle = form.add_text("subtitle")
        slug = form.add_component(SlugControl(template_factory), "slug")

        result = (
            slug.add_field(title)
            .add_field(subtitle)
            .disable_one_time_update()
            .enable_force_edit_update()
            .set_toggle_box_selector(".box")
        )

        assert result is slug
        assert extract_settings(slug.get_control()) == {
            "toggle": ".box",
            "onetime": False,
            "forceEdit": True,
            "fields": ["#frm-post-title", "#frm-post-subtitle"],
        }

    def test_slug_control_can_watch_another_slug(self, template_factory):
        source = SlugControl(template_factory)
        source.input.set_html_id("source-slug")
        target = SlugControl(template_factory).add_field(source)

        assert target.build_settings_payload().fields == ["#source-slug"]

    def test_control_renders_in_jinja_markup_context(self, template_factory):
        slug = SlugControl(template_factory).add_field(FakeField("title-id"))
        assert "ipub-slug-control" in slug.__html__()

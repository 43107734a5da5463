"""XML card builder."""

import logging
import warnings

import pytest

from richmsg import ItemBuilder, MissingFieldError, XmlMessage, XmlMessageBuilder, build_xml_message

DECL = "<?xml version='1.0' encoding='UTF-8' standalone='yes' ?>"


class TestItemBuilder:
    def test_empty(self):
        assert ItemBuilder().render() == "<item bg='0' layout='4'></item>"

    def test_bg_and_layout(self):
        assert ItemBuilder(bg=1, layout=2).render() == "<item bg='1' layout='2'></item>"

    def test_elements_with_defaults(self):
        item = ItemBuilder()
        item.picture("http://img")
        item.title("Hello")
        item.summary("World")
        assert item.render() == (
            "<item bg='0' layout='4'>"
            "<picture cover='http://img'/>"
            "<title size='25' color='#000000'>Hello</title>"
            "<summary color='#000000'>World</summary>"
            "</item>"
        )

    def test_custom_size_and_color(self):
        item = ItemBuilder().title("T", size=30, color="#ff0000").summary("S", color="#00ff00")
        assert item.render() == (
            "<item bg='0' layout='4'>"
            "<title size='30' color='#ff0000'>T</title>"
            "<summary color='#00ff00'>S</summary>"
            "</item>"
        )

    def test_order_and_duplicates_preserved(self):
        item = ItemBuilder().summary("a").title("b").summary("a").picture("p")
        assert item.render() == (
            "<item bg='0' layout='4'>"
            "<summary color='#000000'>a</summary>"
            "<title size='25' color='#000000'>b</title>"
            "<summary color='#000000'>a</summary>"
            "<picture cover='p'/>"
            "</item>"
        )

    def test_none_rejected_at_call(self):
        item = ItemBuilder()
        with pytest.raises(MissingFieldError) as exc:
            item.title(None)
        assert exc.value.field == "text"
        with pytest.raises(MissingFieldError):
            item.summary(None)
        with pytest.raises(MissingFieldError) as exc:
            item.picture(None)
        assert exc.value.field == "cover_url"
        with pytest.raises(MissingFieldError) as exc:
            item.title("t", size=None)
        assert exc.value.field == "size"
        with pytest.raises(MissingFieldError) as exc:
            item.title("t", color=None)
        assert exc.value.field == "color"
        with pytest.raises(MissingFieldError) as exc:
            item.summary("s", color=None)
        assert exc.value.field == "color"
        assert item.render() == "<item bg='0' layout='4'></item>"


class TestXmlMessageBuilder:
    def test_defaults(self):
        assert XmlMessageBuilder().render() == (
            DECL
            + "<msg templateID='1' serviceID='1' action='plugin' actionData='' brief='' flag='3' url=''>"
            "<source name='' icon=''/></msg>"
        )

    def test_all_fields(self):
        builder = XmlMessageBuilder()
        builder.template_id = -7
        builder.service_id = 33
        builder.action = ""
        builder.action_data = "http://a"
        builder.brief = "brief"
        builder.flag = 0
        builder.url = "http://u"
        builder.source("src", "http://icon")
        assert builder.render() == (
            DECL
            + "<msg templateID='-7' serviceID='33' action='' actionData='http://a' brief='brief' flag='0' url='http://u'>"
            "<source name='src' icon='http://icon'/></msg>"
        )

    def test_source_icon_defaults_empty(self):
        builder = XmlMessageBuilder(source_icon_url="old")
        builder.source("name")
        assert builder.source_name == "name"
        assert builder.source_icon_url == ""

    def test_items_in_call_order(self):
        builder = XmlMessageBuilder()
        builder.item(lambda i: i.title("first"))
        builder.item(lambda i: i.title("second"), bg=1, layout=2)
        builder.item()
        text = builder.render()
        assert text.count("<item ") == 3
        assert text.index("first") < text.index("second")
        assert (
            "<item bg='0' layout='4'><title size='25' color='#000000'>first</title></item>"
            "<item bg='1' layout='2'><title size='25' color='#000000'>second</title></item>"
            "<item bg='0' layout='4'></item>"
            "<source name='' icon=''/>"
        ) in text

    def test_none_rejected_in_source_and_item(self):
        builder = XmlMessageBuilder()
        with pytest.raises(MissingFieldError) as exc:
            builder.source(None)
        assert exc.value.field == "name"
        with pytest.raises(MissingFieldError) as exc:
            builder.source("n", icon_url=None)
        assert exc.value.field == "icon_url"
        with pytest.raises(MissingFieldError) as exc:
            builder.item(bg=None)
        assert exc.value.field == "bg"
        with pytest.raises(MissingFieldError) as exc:
            builder.item(layout=None)
        assert exc.value.field == "layout"
        assert builder.render() == XmlMessageBuilder().render()

    def test_configure_can_set_layout(self):
        def fill(item):
            item.layout = 6
            item.bg = 2

        text = XmlMessageBuilder().item(fill).render()
        assert "<item bg='2' layout='6'></item>" in text

    def test_chaining(self):
        text = XmlMessageBuilder().item(lambda i: i.summary("x")).source("s").render()
        assert "<summary color='#000000'>x</summary></item><source name='s' icon=''/>" in text

    def test_no_escaping(self):
        builder = XmlMessageBuilder(brief="it's <b>&")
        builder.item(lambda i: i.title("<x>"))
        text = builder.render()
        assert "brief='it's <b>&'" in text
        assert "<title size='25' color='#000000'><x></title>" in text

    def test_render_is_idempotent(self):
        builder = XmlMessageBuilder(brief="b")
        builder.item(lambda i: i.picture("p"))
        assert builder.render() == builder.render()


class TestBuildXmlMessage:
    def test_explicit_service_id(self):
        msg = build_xml_message(lambda b: setattr(b, "brief", "hi"), service_id=1)
        assert isinstance(msg, XmlMessage)
        assert msg.service_id == 1
        assert msg.content == (
            DECL
            + "<msg templateID='1' serviceID='1' action='plugin' actionData='' brief='hi' flag='3' url=''>"
            "<source name='' icon=''/></msg>"
        )

    def test_builder_starts_with_service_id(self):
        seen = []
        build_xml_message(lambda b: seen.append(b.service_id), service_id=42)
        assert seen == [42]

    def test_wrapper_keeps_argument_service_id(self):
        def configure(b):
            b.service_id = 7

        msg = build_xml_message(configure, service_id=60)
        assert msg.service_id == 60
        assert "serviceID='7'" in msg.content

    def test_deprecated_form_defaults_to_60(self):
        def configure(b):
            b.item(lambda i: i.title("t"))

        with pytest.warns(DeprecationWarning):
            legacy = build_xml_message(configure)
        assert legacy == build_xml_message(configure, service_id=60)
        assert legacy.service_id == 60

    def test_explicit_form_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            build_xml_message(lambda b: None, service_id=1)

    def test_logs_render(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="richmsg.builder"):
            build_xml_message(lambda b: None, service_id=3)
        assert "serviceID=3" in caplog.text

"""Tests for resolving type references to routes and URLs."""

import pytest

from rustdoc_docusaurus.conversion_context import ConfigError, ConversionContext
from rustdoc_docusaurus.link_context import LinkContext
from rustdoc_docusaurus.resolve_link import (
    MAX_LINK_DEPTH,
    module_path_from_span,
    resolve_link,
)


@pytest.fixture
def ctx() -> LinkContext:
    return LinkContext.create(base_path="/docs/api")


def test_local_root_item(crate, ctx: LinkContext) -> None:
    """Test an item defined at the crate root."""
    s = crate.item("struct", "Config", crate.root)

    link = resolve_link("Config", str(s), crate.store(), ctx)

    assert link == "/docs/api/demo/struct.Config"


def test_local_nested_items_use_kind_prefix(crate, ctx: LinkContext) -> None:
    """Test module path and kind prefix of nested local items."""
    net = crate.module("net", crate.root)
    tcp = crate.module("tcp", net)
    f = crate.item("function", "connect", tcp)
    t = crate.item("trait", "Read", net)
    e = crate.item("enum", "Mode", net)
    c = crate.item("constant", "MAX", net)
    a = crate.item("type_alias", "Result", net)
    store = crate.store()

    assert resolve_link("", str(f), store, ctx) == "/docs/api/demo/net/tcp/fn.connect"
    assert resolve_link("", str(t), store, ctx) == "/docs/api/demo/net/trait.Read"
    assert resolve_link("", str(e), store, ctx) == "/docs/api/demo/net/enum.Mode"
    assert resolve_link("", str(c), store, ctx) == "/docs/api/demo/net/constant.MAX"
    assert resolve_link("", str(a), store, ctx) == "/docs/api/demo/net/type.Result"
    assert resolve_link("", str(tcp), store, ctx) == "/docs/api/demo/net/tcp"


def test_empty_base_path(crate) -> None:
    """Test links without a base path are rooted at the crate."""
    s = crate.item("struct", "S", crate.root)

    assert resolve_link("S", str(s), crate.store(), LinkContext()) == "/demo/struct.S"


def test_span_fallback_for_items_without_path(crate, ctx: LinkContext) -> None:
    """Test the module path is guessed from the source file."""
    s = crate.item(
        "struct", "Frame", crate.root, with_path=False, span="/w/demo/src/codec.rs"
    )
    g = crate.item("struct", "Lost", crate.root, with_path=False)
    store = crate.store()

    assert resolve_link("demo::Frame", str(s), store, ctx) == (
        "/docs/api/demo/codec/struct.Frame"
    )
    assert resolve_link("demo::Lost", str(g), store, ctx) == "/docs/api/demo"


def test_module_path_from_span() -> None:
    """Test source file names map to module paths."""
    assert module_path_from_span("/w/demo/src/lib.rs") == ""
    assert module_path_from_span("/w/demo/src/main.rs") == ""
    assert module_path_from_span("/w/demo/src/net/tcp.rs") == "net/tcp"
    assert module_path_from_span("/w/demo/src/net/mod.rs") == "net"
    assert module_path_from_span("build.rs") is None
    assert module_path_from_span(None) is None


def test_reexport_points_at_definition(crate, ctx: LinkContext) -> None:
    """Test `pub use other::X;` in m links to other's X, not to m."""
    other = crate.module("other", crate.root)
    x = crate.item("struct", "X", other)
    m = crate.module("m", crate.root)
    use = crate.reexport(m, "crate::other::X", "X", x)

    assert resolve_link("m::X", str(use), crate.store(), ctx) == (
        "/docs/api/demo/other/struct.X"
    )


def test_unresolved_reexport_is_plain_text(crate, ctx: LinkContext) -> None:
    """Test a cyclic or dangling re-export yields no link."""
    a = crate.reexport(crate.root, "b", "b", None)
    assert resolve_link("a", str(a), crate.store(), ctx) is None


def test_reexport_of_sibling_crate_item(crate) -> None:
    """Test `pub use crate_b::DataB;` links to the sibling crate's page."""
    data_b = crate.external(1, "crate_b", ["crate_b", "DataB"], "struct")
    use = crate.reexport(crate.root, "crate_b::DataB", "DataB", data_b)
    workspace = ["demo", "crate_b"]
    ctx = LinkContext.create(base_path="/docs/api", workspace_crates=workspace)

    link = resolve_link("DataB", str(use), crate.store(), ctx)

    assert link == "/docs/api/crate_b/struct.DataB"


def test_reexport_of_third_party_item(crate, ctx: LinkContext) -> None:
    """Test `pub use serde::Serialize;` links to docs.rs."""
    serialize = crate.external(3, "serde", ["serde", "Serialize"], "trait")
    use = crate.reexport(crate.root, "serde::Serialize", "Serialize", serialize)

    link = resolve_link("Serialize", str(use), crate.store(), ctx)

    assert link == "https://docs.rs/serde/latest/serde/trait.Serialize.html"


def test_reexport_of_unknown_id_is_plain_text(crate, ctx: LinkContext) -> None:
    """Test a re-export whose target has neither index nor path entry."""
    use = crate.reexport(crate.root, "gone::Thing", "Thing", 999)

    assert resolve_link("Thing", str(use), crate.store(), ctx) is None


def test_std_links(crate, ctx: LinkContext) -> None:
    """Test std URLs, including redirects and the internal-module filter."""
    vec = crate.external(1, "alloc", ["alloc", "vec", "Vec"], "struct")
    fmt_result = crate.external(2, "core", ["core", "fmt", "Result"], "type_alias")
    option = crate.external(2, "core", ["core", "option", "Option"], "enum")
    sender = crate.external(
        3, "std", ["std", "sync", "mpsc", "inner", "Sender"], "struct"
    )
    store = crate.store()

    assert resolve_link("Vec", str(vec), store, ctx) == (
        "https://doc.rust-lang.org/alloc/vec/struct.Vec.html"
    )
    assert resolve_link("Result", str(fmt_result), store, ctx) == (
        "https://doc.rust-lang.org/std/result/enum.Result.html"
    )
    assert resolve_link("Option", str(option), store, ctx) == (
        "https://doc.rust-lang.org/std/option/enum.Option.html"
    )
    assert resolve_link("Sender", str(sender), store, ctx) == (
        "https://doc.rust-lang.org/std/sync/mpsc/struct.Sender.html"
    )


def test_std_kind_guess_without_path_entry(crate, ctx: LinkContext) -> None:
    """Test the kind heuristic when the path table has no entry."""
    store = crate.store()

    assert resolve_link("std::io::Error", "ext-1", store, ctx) == (
        "https://doc.rust-lang.org/std/io/enum.Error.html"
    )
    assert resolve_link("std::path::PathBuf", "ext-2", store, ctx) == (
        "https://doc.rust-lang.org/std/path/struct.PathBuf.html"
    )


def test_internal_module_denylist_is_configurable(crate) -> None:
    """Test overriding the internal segment list."""
    item = crate.external(1, "std", ["std", "inner", "Thing"], "struct")
    store = crate.store()
    keep_all = LinkContext.create(internal_modules=())

    assert resolve_link("Thing", str(item), store, keep_all) == (
        "https://doc.rust-lang.org/std/inner/struct.Thing.html"
    )


def test_third_party_docs_rs(crate, ctx: LinkContext) -> None:
    """Test a third-party crate links to docs.rs."""
    value = crate.external(4, "serde_json", ["serde_json", "value", "Value"], "enum")
    store = crate.store()

    assert resolve_link("Value", str(value), store, ctx) == (
        "https://docs.rs/serde_json/latest/serde_json/value/enum.Value.html"
    )


def test_third_party_default_tag(crate, ctx: LinkContext) -> None:
    """Test the struct tag is assumed without a path entry."""
    assert resolve_link("tokio::net::TcpStream", "ext", crate.store(), ctx) == (
        "https://docs.rs/tokio/latest/tokio/net/struct.TcpStream.html"
    )


@pytest.mark.parametrize(
    ("registered", "reported"),
    [("foo-bar", "foo_bar"), ("foo_bar", "foo-bar"), ("foo_bar", "foo_bar")],
)
def test_workspace_sibling_normalization(crate, registered: str, reported: str) -> None:
    """Test hyphen and underscore are equivalent for sibling crates."""
    item = crate.external(5, reported, ["foo_bar", "codec", "Frame"], "struct")
    store = crate.store()
    ctx = LinkContext.create(base_path="/docs/api", workspace_crates=[registered])

    assert resolve_link("Frame", str(item), store, ctx) == (
        "/docs/api/foo_bar/codec/struct.Frame"
    )


def test_sibling_uses_path_kind(crate) -> None:
    """Test sibling links use the kind prefix from the path table."""
    item = crate.external(5, "other", ["other", "run"], "function")
    ctx = LinkContext.create(workspace_crates=["other"])

    assert resolve_link("run", str(item), crate.store(), ctx) == "/other/fn.run"


def test_single_segment_common_std_types(crate, ctx: LinkContext) -> None:
    """Test bare std names fall back to the static table."""
    store = crate.store()

    assert resolve_link("String", "none", store, ctx) == (
        "https://doc.rust-lang.org/std/string/struct.String.html"
    )
    assert resolve_link("HashMap", "none", store, ctx) == (
        "https://doc.rust-lang.org/std/collections/struct.HashMap.html"
    )
    assert resolve_link("Mystery", "none", store, ctx) is None


def test_crate_placeholder(crate, ctx: LinkContext) -> None:
    """Test `$crate` expands to the current crate name."""
    assert resolve_link("$crate::Thing", "unknown", crate.store(), ctx) == (
        "https://docs.rs/demo/latest/demo/struct.Thing.html"
    )


def test_depth_guard(crate, ctx: LinkContext) -> None:
    """Test exceeding the recursion depth yields no link."""
    s = crate.item("struct", "S", crate.root)
    assert resolve_link("S", str(s), crate.store(), ctx, depth=MAX_LINK_DEPTH) is None


def test_links_are_deterministic(crate) -> None:
    """Test repeated resolution gives identical destinations."""
    other = crate.module("other", crate.root)
    x = crate.item("struct", "X", other)
    use = crate.reexport(crate.root, "other::X", "X", x)
    ext = crate.external(4, "sibling", ["sibling", "Y"], "struct")
    store = crate.store()
    ctx = LinkContext.create(base_path="/api", workspace_crates=["sibling"])
    refs = [("X", str(x)), ("X", str(use)), ("Y", str(ext)), ("String", "n")]

    first = [resolve_link(path, item_id, store, ctx) for path, item_id in refs]
    for _ in range(5):
        assert [resolve_link(p, i, store, ctx) for p, i in refs] == first
    assert first[0] == first[1] == "/api/demo/other/struct.X"


def test_conversion_context_builds_link_context() -> None:
    """Test settings flow into a normalized LinkContext."""
    ctx = ConversionContext(base_path="docs/api/", workspace_crates=("a-b", "c"))

    link_ctx = ctx.link_context()

    assert link_ctx.base_path == "/docs/api"
    assert link_ctx.workspace_crates == frozenset({"a_b", "c"})
    assert link_ctx.is_workspace_crate("a-b")


@pytest.mark.parametrize("bad", ["", "has space", "semi;colon", "a/b"])
def test_malformed_workspace_crates_rejected(bad: str) -> None:
    """Test malformed sibling names fail validation up front."""
    with pytest.raises(ConfigError, match="Invalid workspace crate name"):
        ConversionContext(workspace_crates=("ok", bad)).validate()

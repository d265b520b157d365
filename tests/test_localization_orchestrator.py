"""End-to-end tests for build orchestration.

Each test writes a project tree into tmp_path and runs a complete build:
registry + manifest + catalogs + PO files -> one bundle file per view.

Python 3.13+.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from catalogbridge.config import BuildConfig
from catalogbridge.core.hashing import content_hash
from catalogbridge.diagnostics import (
    CatalogSchemaError,
    DiagnosticCode,
    TranslationSourceError,
    ViewConfigurationError,
)
from catalogbridge.enums import LoadStatus, OutputFormat
from catalogbridge.localization.assets import AssetOverrides
from catalogbridge.localization.manifest import LanguageRegistry, ViewRoute
from catalogbridge.localization.orchestrator import (
    BundleBuilder,
    ReconciliationSnapshot,
    ViewInputs,
    build_bundles,
)
from tests.helpers.project_tree import write_project

HOME = {"path": "/", "view": "home", "template": "home.html"}
ABOUT = {"path": "/about", "view": "about", "template": "about.html"}


def _config(root: Path, tmp_path: Path, **kwargs: object) -> BuildConfig:
    return BuildConfig(output_dir=tmp_path / "out", root=root, **kwargs)  # type: ignore[arg-type]


def _read(path: Path) -> dict[str, dict[str, str]]:
    return json.loads(path.read_text(encoding="utf-8"))


class TestGreetingScenario:
    """The canonical Hello/Hola build."""

    def test_translated_and_fallback_locales(self, project_root: Path, tmp_path: Path) -> None:
        """Spanish is translated; French has no match and falls back to English."""
        root = write_project(
            project_root,
            languages=["en", "es", "fr"],
            routes=[HOME],
            messages={"general": {"greeting": "Hello"}},
            translations={"es": {"Hello": "Hola"}, "fr": {"Unrelated": "Sans rapport"}},
            templates=("home.html",),
        )
        summary = build_bundles(_config(root, tmp_path))
        assert summary.views == ("home",)
        assert _read(tmp_path / "out" / "home.json") == {
            "en": {"greeting": "Hello"},
            "es": {"greeting": "Hola"},
            "fr": {"greeting": "Hello"},
        }

    def test_coverage(self, project_root: Path, tmp_path: Path) -> None:
        """Coverage is reported per target locale, source locale excluded."""
        root = write_project(
            project_root,
            languages=["en", "es", "fr"],
            routes=[HOME],
            messages={"general": {"greeting": "Hello", "bye": "Bye"}},
            translations={"es": {"Hello": "Hola"}},
            templates=("home.html",),
        )
        coverage = build_bundles(_config(root, tmp_path)).coverage()
        assert dict(coverage) == {"es": 0.5, "fr": 0.0}

    def test_coverage_ignores_asset_keys(self, project_root: Path, tmp_path: Path) -> None:
        """A catalog key replaced by an asset URL does not count against coverage."""
        root = write_project(
            project_root,
            languages=["en", "es"],
            routes=[HOME],
            messages={"general": {"title": "Site", "logo": "Logo"}},
            assets={"home": {"logo": "/img/logo.png"}},
            translations={"es": {"Site": "Sitio"}},
            templates=("home.html",),
        )
        coverage = build_bundles(_config(root, tmp_path)).coverage()
        assert dict(coverage) == {"es": 1.0}


class TestPrecedenceAcrossScopes:
    """general < view < translation < asset, through real files."""

    def test_full_chain(self, project_root: Path, tmp_path: Path) -> None:
        """Each scope overrides the one below it."""
        root = write_project(
            project_root,
            languages=["en", "es"],
            routes=[HOME],
            messages={
                "general": {"title": "Site", "save": "Save", "logo": "Logo"},
                "home": {"title": "Welcome home"},
            },
            assets={"home": {"logo": "/img/logo.png"}},
            overrides={"/img/logo.png": {"es": "/img/logo-es.png"}},
            translations={
                "es": {"Site": "Sitio", "Welcome home": "Bienvenido", "Save": "Guardar"}
            },
            templates=("home.html",),
        )
        build_bundles(_config(root, tmp_path))
        bundle = _read(tmp_path / "out" / "home.json")
        assert bundle["en"] == {"title": "Welcome home", "save": "Save", "logo": "/img/logo.png"}
        assert bundle["es"] == {
            "title": "Bienvenido",
            "save": "Guardar",
            "logo": "/img/logo-es.png",
        }

    def test_shared_text_across_namespaces(self, project_root: Path, tmp_path: Path) -> None:
        """One PO entry translates identical text in general and in a view."""
        root = write_project(
            project_root,
            languages=["en", "es"],
            routes=[HOME],
            messages={"general": {"save": "Save"}, "home": {"save_draft": "Save"}},
            translations={"es": {"Save": "Guardar"}},
            templates=("home.html",),
        )
        build_bundles(_config(root, tmp_path))
        assert _read(tmp_path / "out" / "home.json")["es"] == {
            "save": "Guardar",
            "save_draft": "Guardar",
        }

    def test_whitespace_insensitive_join(self, project_root: Path, tmp_path: Path) -> None:
        """A re-wrapped msgid still matches the catalog string."""
        root = write_project(
            project_root,
            languages=["en", "es"],
            routes=[HOME],
            messages={"general": {"intro": "Welcome to   the site"}},
            translations={"es": {"Welcome to\nthe site": "Bienvenido al sitio"}},
            templates=("home.html",),
        )
        build_bundles(_config(root, tmp_path))
        assert _read(tmp_path / "out" / "home.json")["es"]["intro"] == "Bienvenido al sitio"


class TestViewClassification:
    """Optional per-view files and invalid views."""

    def test_view_without_catalog_uses_general(self, project_root: Path, tmp_path: Path) -> None:
        """A valid view with no catalog gets the general catalog only."""
        root = write_project(
            project_root,
            routes=[HOME, ABOUT],
            messages={"general": {"a": "A"}, "home": {"h": "H"}},
            templates=("home.html", "about.html"),
        )
        summary = build_bundles(_config(root, tmp_path))
        assert _read(tmp_path / "out" / "about.json") == {"en": {"a": "A"}}
        assert [r.status for r in summary.loads.get_by_namespace("about")] == [
            LoadStatus.ABSENT,
            LoadStatus.ABSENT,
        ]

    def test_redirects_excluded(self, project_root: Path, tmp_path: Path) -> None:
        """Redirect routes produce no bundle."""
        root = write_project(
            project_root,
            routes=[HOME, {"path": "/old", "redirect": "/"}],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        summary = build_bundles(_config(root, tmp_path))
        assert summary.redirects == ("/old",)
        assert sorted(p.name for p in (tmp_path / "out").iterdir()) == ["home.json"]

    def test_only_redirects_still_creates_output_dir(
        self, project_root: Path, tmp_path: Path
    ) -> None:
        """A manifest with no views yields an empty, existing output directory."""
        root = write_project(
            project_root,
            routes=[{"path": "/old", "redirect": "/"}],
            messages={"general": {"a": "A"}},
        )
        summary = build_bundles(_config(root, tmp_path))
        assert summary.written == ()
        assert (tmp_path / "out").is_dir()
        assert list((tmp_path / "out").iterdir()) == []

    def test_missing_template_and_catalog(self, project_root: Path, tmp_path: Path) -> None:
        """An unresolvable view aborts with the missing file chained."""
        root = write_project(
            project_root,
            routes=[HOME, {"path": "/ghost", "view": "ghost", "template": "ghost.html"}],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        with pytest.raises(ViewConfigurationError) as exc_info:
            build_bundles(_config(root, tmp_path))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.VIEW_NOT_RESOLVABLE
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_missing_template_with_catalog(self, project_root: Path, tmp_path: Path) -> None:
        """A catalog does not rescue a view with no template."""
        root = write_project(
            project_root,
            routes=[{"path": "/x", "view": "x"}],
            messages={"general": {"a": "A"}, "x": {"b": "B"}},
            assets={"x": {"logo": "/x.png"}},
        )
        with pytest.raises(ViewConfigurationError, match="no template declared"):
            build_bundles(_config(root, tmp_path))

    def test_nothing_written_on_failure(self, project_root: Path, tmp_path: Path) -> None:
        """A fatal error in a later view leaves no output from earlier views."""
        root = write_project(
            project_root,
            routes=[HOME, {"path": "/ghost", "view": "ghost", "template": "ghost.html"}],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        with pytest.raises(ViewConfigurationError):
            build_bundles(_config(root, tmp_path))
        assert not (tmp_path / "out").exists()

    def test_schema_error_aborts(self, project_root: Path, tmp_path: Path) -> None:
        """A nested value in any catalog fails the run."""
        root = write_project(
            project_root,
            routes=[HOME],
            messages={"general": {"a": "A"}, "home": {"nav": {"x": "y"}}},
            templates=("home.html",),
        )
        with pytest.raises(CatalogSchemaError):
            build_bundles(_config(root, tmp_path))
        assert not (tmp_path / "out").exists()


class TestRequiredInputs:
    """Missing or broken required inputs."""

    def test_missing_general_catalog(self, project_root: Path, tmp_path: Path) -> None:
        """The general catalog is required."""
        root = write_project(project_root, routes=[HOME], templates=("home.html",))
        with pytest.raises(FileNotFoundError):
            build_bundles(_config(root, tmp_path))

    def test_broken_po_file(self, project_root: Path, tmp_path: Path) -> None:
        """An unparsable PO file fails the run."""
        root = write_project(
            project_root,
            languages=["en", "es"],
            routes=[HOME],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        (root / "i18n" / "translations" / "es.po").write_text(
            'msgid "A"\nnot a keyword\n', encoding="utf-8"
        )
        with pytest.raises(TranslationSourceError):
            build_bundles(_config(root, tmp_path))


class TestOutputFormat:
    """ESM output through the builder."""

    def test_esm_files(self, project_root: Path, tmp_path: Path) -> None:
        """ESM builds write '<view>.js' modules."""
        root = write_project(
            project_root,
            routes=[HOME],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        summary = build_bundles(_config(root, tmp_path, output_format=OutputFormat.ESM))
        assert summary.written == (tmp_path / "out" / "home.js",)
        assert summary.written[0].read_text(encoding="utf-8").startswith("export default {")


class TestReconciliationSnapshot:
    """Snapshot construction without the filesystem."""

    def _snapshot(self) -> ReconciliationSnapshot:
        return ReconciliationSnapshot.build(
            LanguageRegistry(("en", "es")),
            {"greeting": "Hello"},
            {
                "home": ViewInputs(
                    ViewRoute("/", "home", "home.html"),
                    catalog={"title": "Home"},
                    assets={"logo": "/logo.png"},
                )
            },
            {"es": ((content_hash("Home"), "Inicio"),)},
            AssetOverrides({"/logo.png": {"es": "/logo-es.png"}}),
        )

    def test_shared_structures(self) -> None:
        """Content map, hash index and deltas cover every namespace."""
        snapshot = self._snapshot()
        assert dict(snapshot.content_map) == {"general.greeting": "Hello", "home.title": "Home"}
        assert snapshot.hash_index.identifiers() == {"general.greeting", "home.title"}
        assert dict(snapshot.deltas["es"]) == {"home.title": "Inicio"}
        assert "en" not in snapshot.deltas

    def test_compose(self) -> None:
        """compose applies the snapshot to one view."""
        bundle = self._snapshot().compose("home")
        assert dict(bundle.bundles["es"]) == {
            "greeting": "Hello",
            "title": "Inicio",
            "logo": "/logo-es.png",
        }

    def test_compose_unknown_view(self) -> None:
        """Views outside the snapshot raise KeyError."""
        with pytest.raises(KeyError):
            self._snapshot().compose("missing")


class TestBundleBuilder:
    """BundleBuilder helpers."""

    def test_classify_redirect_rejected(self, tmp_path: Path) -> None:
        """Redirect routes cannot be classified."""
        builder = BundleBuilder(BuildConfig(output_dir=tmp_path / "out", root=tmp_path))
        with pytest.raises(ValueError, match="Redirect route"):
            builder.classify_view(ViewRoute("/old", redirect="/"))

    def test_template_exists(self, project_root: Path, tmp_path: Path) -> None:
        """Templates resolve against the templates directory."""
        root = write_project(project_root, templates=("pages/home.html",))
        builder = BundleBuilder(_config(root, tmp_path))
        assert builder.template_exists(ViewRoute("/", "home", "pages/home.html"))
        assert not builder.template_exists(ViewRoute("/", "home", "missing.html"))
        assert not builder.template_exists(ViewRoute("/", "home", None))

    def test_summary_repr(self, project_root: Path, tmp_path: Path) -> None:
        """BuildSummary repr reports counts."""
        root = write_project(
            project_root,
            routes=[HOME],
            messages={"general": {"a": "A"}},
            templates=("home.html",),
        )
        summary = BundleBuilder(_config(root, tmp_path)).run()
        assert repr(summary).startswith("BuildSummary(views=1, written=1, redirects=0")
        assert summary.get_bundle("home") is not None
        assert summary.get_bundle("nope") is None
        assert [s.locale for s in summary.get_stats("en")] == ["en"]

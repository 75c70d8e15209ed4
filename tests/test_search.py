"""Tests for pattern-based discovery handlers."""

from pathlib import Path

import pytest

from devweb_mcp.errors import AccessError, NotFoundError
from devweb_mcp.handlers import search
from devweb_mcp.server.models import GraphQLSchemaFile
from devweb_mcp.server.state import ProjectContext

from conftest import write_files


def listed(text: str) -> list[str]:
    return [line[2:] for line in text.splitlines() if line.startswith("- ")]


class TestSplitDirectories:
    def test_trims_and_drops_blanks(self):
        assert search.split_directories(" apps , ,packages ") == [
            "apps",
            "packages",
        ]

    def test_empty_means_root(self):
        assert search.split_directories("") == ["."]


class TestSearchFiles:
    @pytest.mark.asyncio
    async def test_single_directory_paths_are_relative_to_it(self, ctx):
        text = await search.search_files(ctx, "*.tsx", "packages/ui")

        assert text.startswith('Found 1 files matching pattern "*.tsx":\n\n')
        assert listed(text) == ["Button.tsx"]

    @pytest.mark.asyncio
    async def test_recursive_pattern_skips_dependency_cache(self, ctx):
        text = await search.search_files(ctx, "**/*.test.ts")

        files = listed(text)
        assert "api/orders.integration.test.ts" in files
        assert not any(f.startswith("node_modules/") for f in files)

    @pytest.mark.asyncio
    async def test_hidden_entries_not_matched(self, ctx):
        text = await search.search_files(ctx, "**/*.yml")
        assert text.startswith("Found 0 files")

    @pytest.mark.asyncio
    async def test_multiple_directories_grouped_with_prefix(self, ctx):
        text = await search.search_files(ctx, "**/*.tsx", "apps, packages")

        files = listed(text)
        assert sorted(files) == [
            "apps/web/components/LoginForm.test.tsx",
            "apps/web/components/LoginForm.tsx",
            "packages/ui/Button.tsx",
        ]
        # groups keep argument order
        assert files[-1] == "packages/ui/Button.tsx"

    @pytest.mark.asyncio
    async def test_repeated_directory_not_deduplicated(self, ctx):
        text = await search.search_files(
            ctx, "*.tsx", "packages/ui,packages/ui"
        )
        assert listed(text) == ["packages/ui/Button.tsx"] * 2

    @pytest.mark.asyncio
    async def test_missing_directory(self, ctx):
        with pytest.raises(NotFoundError):
            await search.search_files(ctx, "*", "nope")

    @pytest.mark.asyncio
    async def test_directory_outside_root(self, ctx):
        with pytest.raises(AccessError):
            await search.search_files(ctx, "*", "../..")

    @pytest.mark.asyncio
    async def test_parent_segment_in_pattern_denied(self, ctx, project):
        (project.parent / "outside_secret.txt").write_text("x")

        with pytest.raises(AccessError, match="escapes"):
            await search.search_files(ctx, "../*")
        with pytest.raises(AccessError):
            await search.search_files(ctx, "apps/../../*", "apps, packages")

    @pytest.mark.asyncio
    async def test_absolute_pattern_denied(self, ctx, project):
        (project.parent / "outside_secret.txt").write_text("x")

        with pytest.raises(AccessError):
            await search.search_files(ctx, str(project.parent / "*"))

    @pytest.mark.asyncio
    async def test_dotted_names_are_not_parent_segments(self, ctx, project):
        write_files(project, {"docs/..notes.md": "n"})

        text = await search.search_files(ctx, "**/..notes.md")
        assert listed(text) == ["docs/..notes.md"]


class TestFindComponents:
    @pytest.mark.asyncio
    async def test_default_directories(self, ctx):
        text = await search.find_components(ctx)

        assert text.startswith("Found 4 React components:")
        assert sorted(listed(text)) == [
            "apps/web/components/LoginForm.test.tsx",
            "apps/web/components/LoginForm.tsx",
            "packages/ui/Button.tsx",
            "packages/ui/legacy/Card.jsx",
        ]

    @pytest.mark.asyncio
    async def test_name_filter(self, ctx):
        text = await search.find_components(ctx, name="Button")
        assert listed(text) == ["packages/ui/Button.tsx"]

    @pytest.mark.asyncio
    async def test_name_with_glob_characters_is_literal(self, ctx, project):
        write_files(project, {"apps/web/Weird[1].tsx": ""})

        text = await search.find_components(ctx, name="[1]")

        assert listed(text) == ["apps/web/Weird[1].tsx"]

    @pytest.mark.asyncio
    async def test_missing_directory_contributes_nothing(self, ctx):
        text = await search.find_components(ctx, directory="nope,packages")

        assert sorted(listed(text)) == [
            "packages/ui/Button.tsx",
            "packages/ui/legacy/Card.jsx",
        ]


class TestGraphQLSchemas:
    def test_collect_all_features(self, ctx):
        schemas = search.collect_graphql_schemas(ctx)
        assert sorted(s.file for s in schemas) == [
            "features/auth/schema.gql",
            "features/billing/invoice.graphql",
        ]

    def test_collect_one_feature(self, ctx):
        schemas = search.collect_graphql_schemas(ctx, "auth")
        assert [s.file for s in schemas] == ["features/auth/schema.gql"]
        assert schemas[0].content == "type Query { me: User }"

    def test_short_schema_closes_fence(self):
        section = search.format_schema(
            GraphQLSchemaFile(file="a.gql", content="type A { id: ID }")
        )
        assert section == "## a.gql\n```graphql\ntype A { id: ID }\n```"

    @pytest.mark.asyncio
    async def test_long_schema_truncated_only_when_rendered(
        self, ctx, project: Path
    ):
        body = "a" * 500 + "TAIL" * 25
        write_files(project, {"features/big/big.gql": body})

        raw = search.collect_graphql_schemas(ctx, "big")
        text = await search.get_graphql_schemas(ctx, "big")

        assert raw[0].content == body
        assert text == (
            "Found 1 GraphQL schema files:\n\n"
            "## features/big/big.gql\n```graphql\n" + "a" * 500 + "\n...\n```"
        )

    @pytest.mark.asyncio
    async def test_no_features_directory(self, tmp_path, vcs):
        ctx = ProjectContext(root=tmp_path, vcs=vcs, max_diff_chars=10)
        text = await search.get_graphql_schemas(ctx)
        assert text == "Found 0 GraphQL schema files:\n\n"


class TestFindTestFiles:
    def test_unit(self, ctx):
        assert sorted(search.collect_test_files(ctx, "unit")) == [
            "api/checkout.e2e.test.ts",
            "api/orders.integration.test.ts",
            "apps/web/components/LoginForm.test.tsx",
            "packages/ui/Button.spec.ts",
        ]

    def test_integration(self, ctx):
        assert search.collect_test_files(ctx, "integration") == [
            "api/orders.integration.test.ts"
        ]

    def test_e2e(self, ctx):
        assert sorted(search.collect_test_files(ctx, "e2e")) == [
            "api/checkout.e2e.test.ts",
            "e2e/login.ts",
        ]

    def test_all_reports_files_only(self, ctx):
        files = search.collect_test_files(ctx, "all")
        assert "e2e/fixtures/user.json" in files
        assert "e2e/fixtures" not in files

    def test_all_is_superset_of_other_types(self, ctx):
        everything = set(search.collect_test_files(ctx, "all"))
        union: set[str] = set()
        for kind in ("unit", "integration", "e2e"):
            union |= set(search.collect_test_files(ctx, kind))
        assert union <= everything

    def test_duplicates_removed_first_occurrence_kept(self, ctx, project):
        write_files(project, {"e2e/smoke.test.ts": "it()"})

        files = search.collect_test_files(ctx, "all")

        assert files.count("e2e/smoke.test.ts") == 1
        # matched first by **/*.test.*, before the e2e/** pattern
        assert files.index("e2e/smoke.test.ts") < files.index("e2e/login.ts")

    def test_dependency_cache_ignored(self, ctx):
        files = search.collect_test_files(ctx, "all")
        assert not any("node_modules" in f for f in files)

    @pytest.mark.asyncio
    async def test_header(self, ctx):
        text = await search.find_test_files(ctx, "integration")
        assert text == (
            "Found 1 integration test files:\n\n"
            "- api/orders.integration.test.ts"
        )

"""Fixed layout of an ERS web scaffold: directories, files, dependencies."""

from dataclasses import dataclass
from typing import List, Sequence

GUARD_FILE = "package.json"
TSCONFIG_FILE = "tsconfig.json"
GENERATED_METADATA_FILE = "CLAUDE.md"

DIRECTORIES = [
    "config",
    "src/graphql",
    "src/restful",
    "src/websocket",
    "src/web/pages",
]


@dataclass(frozen=True)
class ScaffoldFile:
    """A file written into the project, copied from a bundled template."""
    path: str
    template: str


def _files(*paths):
    return [ScaffoldFile(path=p, template=p) for p in paths]


FILES = _files(
    "src/graphql/graphiql.html",
    "src/graphql/api.ts",
    "src/graphql/graphql.d.ts",
    "src/graphql/schema.graphql",
    "src/graphql/resolver.ts",
    "src/graphql/index.ts",
    "src/restful/index.ts",
    "src/websocket/index.ts",
    "src/web/logo.svg",
    "src/web/styles.css",
    "src/web/index.html",
    "src/web/main.tsx",
    "src/web/pages/home.tsx",
    "src/web/pages/about.tsx",
    "src/web/layout.tsx",
    "index.ts",
    "bunfig.toml",
)

DEPENDENCIES = [
    "react",
    "react-dom",
    "react-router",
    "tailwindcss",
    "bun-plugin-tailwind",
    "daisyui",
    "@graphql-tools/schema",
    "graphql-http",
]

DEV_DEPENDENCIES = [
    "@types/node",
    "@types/react",
    "@types/react-dom",
]


def init_command(bun: str = "bun") -> List[str]:
    return [bun, "init", "-y"]


def add_command(bun: str, packages: Sequence[str], dev: bool = False) -> List[str]:
    """Build a ``bun add`` invocation for *packages*."""
    cmd = [bun, "add"]
    if dev:
        cmd.append("-D")
    return cmd + list(packages)

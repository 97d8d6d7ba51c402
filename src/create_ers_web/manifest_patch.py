"""Post-init edits to package.json and tsconfig.json."""

import json
import os

DEV_SCRIPT = "bun --watch index.ts"
START_SCRIPT = "NODE_ENV=production bun index.ts"
DOM_LIB = "DOM"


def strip_jsonc(text: str) -> str:
    """Remove comments and trailing commas from JSONC text.

    Handles ``//`` line comments, ``/* */`` block comments, and commas
    directly before ``}`` or ``]``. String literals are copied untouched.
    """
    out = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == '"':
            end = _string_end(text, i)
            out.append(text[i:end])
            i = end
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            i = n if newline == -1 else newline
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            i = n if close == -1 else close + 2
        elif ch == "," and _next_significant(text, i + 1) in ("}", "]"):
            i += 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _string_end(text, start):
    """Index just past the string literal opening at *start*."""
    i = start + 1
    while i < len(text):
        if text[i] == "\\":
            i += 2
            continue
        if text[i] == '"':
            return i + 1
        i += 1
    return len(text)


def _next_significant(text, start):
    """First character from *start* that is not whitespace or part of a comment."""
    i = start
    while i < len(text):
        if text[i].isspace():
            i += 1
        elif text.startswith("//", i):
            newline = text.find("\n", i)
            if newline == -1:
                return ""
            i = newline
        elif text.startswith("/*", i):
            close = text.find("*/", i + 2)
            if close == -1:
                return ""
            i = close + 2
        else:
            return text[i]
    return ""


def load_jsonc(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return json.loads(strip_jsonc(f.read()))


def _write_json(path, data):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
        f.write("\n")


def patch_package_json(path: str) -> dict:
    """Add dev/start scripts and mark the package as an ES module entry at index.ts."""
    with open(path, "r", encoding="utf-8") as f:
        pkg = json.load(f)

    scripts = pkg.get("scripts") or {}
    scripts["dev"] = DEV_SCRIPT
    scripts["start"] = START_SCRIPT
    pkg["scripts"] = scripts
    pkg["type"] = "module"
    pkg["main"] = "index.ts"

    _write_json(path, pkg)
    return pkg


def patch_tsconfig(path: str) -> dict:
    """Ensure compilerOptions.lib includes DOM, appending it at most once."""
    tsconfig = load_jsonc(path)

    compiler_options = tsconfig.setdefault("compilerOptions", {})
    lib = compiler_options.setdefault("lib", [])
    if DOM_LIB not in lib:
        lib.append(DOM_LIB)

    _write_json(path, tsconfig)
    return tsconfig


def patch_manifests(root: str, package_json: str, tsconfig: str) -> None:
    patch_package_json(os.path.join(root, package_json))
    patch_tsconfig(os.path.join(root, tsconfig))

"""Path helpers with '/'-separated, purely lexical semantics."""

from __future__ import annotations

import posixpath


def join(base: str, relative: str) -> str:
    """Append relative to base; an absolute relative replaces base."""
    return posixpath.join(base, relative)


def filename(path: str) -> str:
    """Last path component; empty when the path ends with a separator."""
    return posixpath.basename(path)


def extension(path: str) -> str:
    """Extension of the file name including the dot, or an empty string."""
    name = filename(path)
    if name in (".", ".."):
        return ""
    return posixpath.splitext(name)[1]


def replace_extension(path: str, new_ext: str) -> str:
    """Replace (or add) the extension; a missing leading dot is supplied."""
    ext = extension(path)
    stem = path[: len(path) - len(ext)] if ext else path
    if new_ext and not new_ext.startswith("."):
        new_ext = "." + new_ext
    return stem + new_ext


def parent(path: str) -> str:
    """The path without its last component."""
    return posixpath.dirname(path)


def _lexically_normal(path: str) -> str:
    if not path:
        return ""
    absolute = path.startswith("/")
    trailing = path.endswith("/")
    names = [part for part in path.split("/") if part]
    stack: list[str] = []
    for position, name in enumerate(names):
        last = position == len(names) - 1
        if name == ".":
            if last:
                trailing = True
            continue
        if name == "..":
            if stack and stack[-1] != "..":
                stack.pop()
                if last:
                    trailing = True
            elif not (absolute and not stack):
                stack.append("..")
            continue
        stack.append(name)
        if last:
            trailing = path.endswith("/")
    if not stack:
        return "/" if absolute else "."
    if stack[-1] == "..":
        trailing = False
    result = ("/" if absolute else "") + "/".join(stack)
    return result + "/" if trailing else result


def make_absolute(rel: str, base: str) -> str:
    """Join rel onto base and normalise the result lexically."""
    return _lexically_normal(join(base, rel))
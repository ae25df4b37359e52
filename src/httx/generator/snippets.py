"""Code snippet generators: reproduce a request as curl, Python, Node or Go code."""

from httx.errors import UnsupportedFormatError
from httx.parser.base import HttpDocument


def generate_curl(doc: HttpDocument) -> str:
    parts = ["curl"]
    if doc.method != "GET":
        parts.append(f"-X {doc.method}")
    parts.append(f"'{doc.url}'")
    for key, value in doc.headers.items():
        parts.append(f"-H '{key}: {value}'")
    if doc.body:
        escaped = doc.body.replace("'", "'\\''")
        parts.append(f"-d '{escaped}'")
    return " \\\n  ".join(parts)


def generate_python(doc: HttpDocument) -> str:
    lines = ["import requests", ""]

    if doc.headers:
        lines.append("headers = {")
        for key, value in doc.headers.items():
            lines.append(f'    "{key}": "{value}",')
        lines.append("}")
        lines.append("")

    if doc.body:
        lines.append(f"payload = '''{doc.body}'''")
        lines.append("")

    method = doc.method.lower()
    args = [f'"{doc.url}"']
    if doc.headers:
        args.append("headers=headers")
    if doc.body:
        args.append("params=payload" if method == "get" else "data=payload")

    lines.append(f"response = requests.{method}({', '.join(args)})")
    lines.append("print(response.status_code)")
    lines.append("print(response.text)")
    return "\n".join(lines)


def generate_node(doc: HttpDocument) -> str:
    options = [f'  method: "{doc.method}"']
    if doc.headers:
        header_lines = ",\n".join(f'    "{k}": "{v}"' for k, v in doc.headers.items())
        options.append(f"  headers: {{\n{header_lines}\n  }}")
    if doc.body:
        options.append(f"  body: JSON.stringify({doc.body})")

    return "\n".join([
        f'const response = await fetch("{doc.url}", {{',
        ",\n".join(options),
        "});",
        "",
        "const data = await response.json();",
        "console.log(data);",
    ])


def generate_go(doc: HttpDocument) -> str:
    lines = ["package main", "", "import (", '\t"fmt"', '\t"io"', '\t"net/http"']
    if doc.body:
        lines.append('\t"strings"')
    lines.extend([")", "", "func main() {"])

    if doc.body:
        lines.append(f"\tbody := strings.NewReader(`{doc.body}`)")
        lines.append(f'\treq, err := http.NewRequest("{doc.method}", "{doc.url}", body)')
    else:
        lines.append(f'\treq, err := http.NewRequest("{doc.method}", "{doc.url}", nil)')
    lines.extend(["\tif err != nil {", "\t\tpanic(err)", "\t}"])

    for key, value in doc.headers.items():
        lines.append(f'\treq.Header.Set("{key}", "{value}")')

    lines.extend([
        "",
        "\tclient := &http.Client{}",
        "\tresp, err := client.Do(req)",
        "\tif err != nil {",
        "\t\tpanic(err)",
        "\t}",
        "\tdefer resp.Body.Close()",
        "",
        "\tdata, _ := io.ReadAll(resp.Body)",
        "\tfmt.Println(string(data))",
        "}",
    ])
    return "\n".join(lines)


SNIPPET_LANGUAGES = {
    "curl": generate_curl,
    "python": generate_python,
    "node": generate_node,
    "go": generate_go,
}


def generate_snippet(doc: HttpDocument, language: str) -> str:
    """Generate a code snippet that sends the request.

    Raises:
        UnsupportedFormatError: language is not one of SNIPPET_LANGUAGES.
    """
    generator = SNIPPET_LANGUAGES.get(language)
    if generator is None:
        raise UnsupportedFormatError(language, kind="snippet language")
    return generator(doc)

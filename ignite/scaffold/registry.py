"""Template registry: content sources keyed by file base name."""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

# Registry value meaning "load and render the template asset for this name"
TEMPLATE_SENTINEL = ""


@dataclass(frozen=True)
class TemplateSpec:
    """Content source for a single file name."""
    name: str
    content: str = TEMPLATE_SENTINEL

    @property
    def is_template(self) -> bool:
        """True when content comes from a rendered asset instead of literal text."""
        return self.content == TEMPLATE_SENTINEL

    @property
    def asset_name(self) -> str:
        """Asset file name: a trailing .yaml is stripped and .txt appended."""
        stem = self.name[:-len(".yaml")] if self.name.endswith(".yaml") else self.name
        return f"{stem}.txt"


class TemplateRegistry:
    """Immutable lookup from file base name to TemplateSpec."""

    def __init__(self, entries: Mapping[str, str]):
        self._entries = MappingProxyType(dict(entries))

    def lookup(self, name: str) -> Optional[TemplateSpec]:
        """Return the spec registered for ``name``, or None."""
        if name not in self._entries:
            return None
        return TemplateSpec(name=name, content=self._entries[name])

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


GITIGNORE = """
# Binaries
bin/
*.exe
*.dll
*.so
*.dylib

# Configs
*.env

# Logs
*.log
"""

DOCKERFILE = """
FROM golang:1.23-alpine3.20 AS builder
WORKDIR /app
COPY . .
RUN go build -o main /app/cmd/server/main.go

EXPOSE 3030

CMD ["./main"]
"""

MAIN_GO = """
package main

import "fmt"

func main() {
\tfmt.Println("Hello World!")
}
"""

CI_WORKFLOW = """
name: ci-test

on:
  push:
    branches: [main]
  pull_request:
    branches: [main]

jobs:
  test:
    name: Test
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4

      - name: Set up Go
        uses: actions/setup-go@v5
        with:
          go-version: "^1.21"

      - name: Run tests
        run: make race-test
"""

MAKEFILE = """
test:
\tgo test -v ./...

race-test:
\tgo test -v -race ./...

sqlc:
\tcd .envs/configs && sqlc generate

run:
\tcd cmd/server && go run main.go

.PHONY: test race-test sqlc run
"""

README = """
# Ignite Project

This project was created with Ignite, a CLI tool for bootstrapping Go-based
applications with flexibility for various configurations.

## Getting Started

Make sure you have **Go** and **Git** installed, then install dependencies:

```sh
go mod tidy
```

## Available Commands

```sh
make sqlc
make test
make race-test
make run
```

## Project Structure

```
.envs                    # Environment configurations
cmd
├── server               # Server main entry point
└── cli                  # CLI main entry point
gapi                     # gRPC generated files (if gRPC selected)
internal
├── handlers             # HTTP handler functions
├── repository           # Data access layer
├── services             # Business logic layer
└── mysql/postgres       # Database files (queries, migrations, mocks)
pkg                      # Common utilities and helpers
.github/workflows        # CI configuration (if --withWorkflow selected)
```

## Configuration

- `.envs/.local/config.env` - local environment configuration
- `.envs/configs/sqlc.yaml` - sqlc configuration for SQL code generation
"""

DEFAULT_TEMPLATES = {
    ".gitignore": GITIGNORE,
    "Dockerfile": DOCKERFILE,
    "main.go": MAIN_GO,
    "sqlc.yaml": TEMPLATE_SENTINEL,
    "ci.yml": CI_WORKFLOW,
    "Makefile": MAKEFILE,
    "README.md": README,
}


def default_registry() -> TemplateRegistry:
    """Build the registry used for generated Go projects."""
    return TemplateRegistry(DEFAULT_TEMPLATES)

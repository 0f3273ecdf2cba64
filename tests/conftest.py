"""Shared fixtures: a sample Docusaurus site and a clean environment."""

from pathlib import Path

import pytest

SAMPLE_DOCS = {
    "getting-started.md": """---
title: Getting Started
description: Learn how to get started with our platform
sidebar_position: 1
---

# Getting Started

Welcome to our documentation! This guide will help you get started quickly.

## Installation

```bash
npm install our-package
```
""",
    "api/authentication.md": """---
title: Authentication
description: How to authenticate with our API
tags:
  - api
  - security
---

# Authentication

Our API uses API key authentication.
""",
    "guides/deployment.md": """---
title: Deployment Guide
description: Deploy your application to production
tags: [deployment, production]
---

# Deployment Guide

This guide covers deploying your application to various platforms.
""",
}

SAMPLE_BLOG = {
    "2024-01-15-welcome.md": """---
slug: welcome
title: Welcome to Our Blog
authors: [admin]
tags: ["welcome", "announcement"]
---

# Welcome to Our Blog

This is our first blog post. Stay tuned for more content!
""",
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep STATICMCP_* settings from the host out of every test."""
    for name in (
        "STATICMCP_OUTPUT_DIR",
        "STATICMCP_SERVER_NAME",
        "STATICMCP_SERVER_VERSION",
        "STATICMCP_PROTOCOL_VERSION",
        "STATICMCP_BASE_URI",
        "STATICMCP_LOG_DIR",
        "STATICMCP_DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)


def _write_tree(root: Path, files: dict) -> None:
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def docusaurus_site(tmp_path):
    """Create a sample Docusaurus project with docs and one blog post."""
    site = tmp_path / "sample-docusaurus"
    site.mkdir()
    (site / "docusaurus.config.js").write_text(
        "module.exports = { title: 'My Site', url: 'https://mysite.com' };\n"
    )
    _write_tree(site / "docs", SAMPLE_DOCS)
    _write_tree(site / "blog", SAMPLE_BLOG)
    return site


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "test-output"

"""Flag bases and concrete command declarations.

Bases (``RAILS``, ``IMAGE``, ``OPENSHIFT``) are never dispatched
directly; concrete commands extend at most one of them.  The handler
for each command is bound in :mod:`porta_dev.cli.commands`.
"""

from __future__ import annotations

from porta_dev.core.derivations import (
    derive_cluster_endpoint,
    derive_image_tag,
    derive_project,
    derive_wildcard_domain,
)
from porta_dev.core.models import CommandSpec, FlagSpec

# ---------------------------------------------------------------------------
# Shared flag groups
# ---------------------------------------------------------------------------

IMAGE_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("branch", "Branch of the porta checkout (default: checked out branch)"),
    FlagSpec("project", "Project name (default: derived from the branch)"),
    FlagSpec("image_repository", "Container image repository"),
    FlagSpec("image_tag", "Container image tag (default: REPOSITORY:PROJECT)"),
)

OPENSHIFT_FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec("cluster_domain", "Base domain of the OpenShift cluster"),
    FlagSpec("cluster_endpoint", "API endpoint (default: derived from the domain)"),
    FlagSpec("wildcard_domain", "Wildcard domain of the deployed tenant routes"),
    FlagSpec("oc_token", "Token for 'oc login' (takes precedence over user/password)"),
    FlagSpec("oc_username", "User for 'oc login'"),
    FlagSpec("oc_password", "Password for 'oc login'"),
)

IMAGE_DERIVATIONS = (derive_project, derive_image_tag)


# ---------------------------------------------------------------------------
# Bases
# ---------------------------------------------------------------------------

RAILS = CommandSpec(
    name="rails",
    flags=(
        FlagSpec("rails_env", "Rails environment"),
        FlagSpec("database", "Database backend: mysql, postgres or oracle"),
    ),
)

IMAGE = CommandSpec(
    name="image",
    flags=IMAGE_FLAGS,
    uses_primary_repo=True,
    derivations=IMAGE_DERIVATIONS,
)

OPENSHIFT = CommandSpec(
    name="openshift",
    flags=IMAGE_FLAGS + OPENSHIFT_FLAGS,
    uses_primary_repo=True,
    derivations=IMAGE_DERIVATIONS + (derive_cluster_endpoint, derive_wildcard_domain),
)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

HELP = CommandSpec(name="help", summary="List the available commands")
DOCTOR = CommandSpec(name="doctor", summary="Check the required tools are installed")

SERVER = CommandSpec(
    name="server",
    summary="Start the Rails server",
    parent=RAILS,
    flags=(FlagSpec("port", "Port to listen on", short="-p"),),
)
CONSOLE = CommandSpec(name="console", summary="Open a Rails console", parent=RAILS)
SIDEKIQ = CommandSpec(name="sidekiq", summary="Start the Sidekiq worker", parent=RAILS)
TEST = CommandSpec(
    name="test", summary="Run one test file", parent=RAILS, requires_file=True,
)
CUCUMBER = CommandSpec(
    name="cucumber", summary="Run one cucumber feature", parent=RAILS, requires_file=True,
)
SETUP = CommandSpec(
    name="setup", summary="Install dependencies and set up the database", parent=RAILS,
)
WEBPACK = CommandSpec(name="webpack", summary="Start the webpack dev server")
DEPS = CommandSpec(
    name="deps",
    summary="Start the database, redis and memcached containers",
    flags=(FlagSpec("database", "Database backend: mysql, postgres or oracle"),),
)
BUILD = CommandSpec(
    name="build",
    summary="Build the container image",
    parent=IMAGE,
    flags=(FlagSpec("dockerfile", "Dockerfile, relative to the checkout"),),
)
PUSH = CommandSpec(name="push", summary="Push the container image", parent=IMAGE)
DEPLOY = CommandSpec(
    name="deploy",
    summary="Deploy the image to an OpenShift project",
    parent=OPENSHIFT,
    flags=(
        FlagSpec("docker_config", "Docker config.json uploaded as the pull secret"),
        FlagSpec("template", "OpenShift template, relative to the checkout"),
    ),
)
LOGS = CommandSpec(
    name="logs",
    summary="Follow the logs of a deployed component",
    parent=OPENSHIFT,
    flags=(FlagSpec("component", "Deployment config to follow"),),
)
DESTROY = CommandSpec(
    name="destroy", summary="Delete the OpenShift project", parent=OPENSHIFT,
)

"""Command-line recipes for the external tools porta-dev drives.

The strings below are opaque to the rest of the package: handlers only
fill in placeholders with :func:`render` and hand the result to an
executor.  Placeholder values are shell-quoted, so a path containing
spaces survives the executor's ``shlex.split``.
"""

from __future__ import annotations

import shlex
from types import MappingProxyType

# --- Rails / Node ------------------------------------------------------------

RAILS_SERVER = "bundle exec rails server --port {port}"
RAILS_CONSOLE = "bundle exec rails console"
SIDEKIQ = "bundle exec sidekiq"
RAILS_TEST = "bundle exec rails test {file}"
CUCUMBER = "bundle exec cucumber {file}"
BUNDLE_INSTALL = "bundle install"
YARN_INSTALL = "yarn install"
DB_SETUP = "bundle exec rails db:setup"
WEBPACK_DEV = "npm run dev"

# --- Docker ------------------------------------------------------------------

DOCKER_BUILD = "docker build --tag {tag} --file {dockerfile} ."
DOCKER_PUSH = "docker push {tag}"

DATABASE_CONTAINERS = MappingProxyType({
    "mysql": (
        "docker run --detach --name porta-mysql --publish 3306:3306 "
        "--env MYSQL_ALLOW_EMPTY_PASSWORD=1 mysql:8.0"
    ),
    "postgres": (
        "docker run --detach --name porta-postgres --publish 5432:5432 "
        "--env POSTGRES_HOST_AUTH_METHOD=trust postgres:13"
    ),
    "oracle": (
        "docker run --detach --name porta-oracle --publish 1521:1521 "
        "quay.io/3scale/oracle:19.3.0-ee-ci-prebuilt"
    ),
})
REDIS_CONTAINER = (
    "docker run --detach --name porta-redis --publish 6379:6379 redis:6.2-alpine"
)
MEMCACHED_CONTAINER = (
    "docker run --detach --name porta-memcached --publish 11211:11211 "
    "memcached:1.6-alpine"
)

# --- OpenShift ---------------------------------------------------------------

OC_LOGIN_TOKEN = "oc login {endpoint} --token={token}"
OC_LOGIN_PASSWORD = "oc login {endpoint} --username={username} --password={password}"
OC_NEW_PROJECT = "oc new-project {project}"
OC_PULL_SECRET = (
    "oc create secret generic porta-pull-secret "
    "--from-file=.dockerconfigjson={docker_config} "
    "--type=kubernetes.io/dockerconfigjson --namespace={project}"
)
OC_NEW_APP = (
    "oc new-app --file={template} --param=WILDCARD_DOMAIN={wildcard_domain} "
    "--param=SYSTEM_IMAGE={image_tag} --namespace={project}"
)
OC_LOGS = "oc logs --follow dc/{component} --namespace={project}"
OC_DELETE_PROJECT = "oc delete project {project}"


def render(template: str, /, **values: object) -> str:
    """Fill *template* with shell-quoted *values*."""
    return template.format(**{key: shlex.quote(str(value)) for key, value in values.items()})

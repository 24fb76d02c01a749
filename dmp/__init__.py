"""DMP meeting planner backend.

This package contains the REST backend used to plan meetings inside projects.
Users create projects, hold meetings, raise topics, track actions and comments,
and classify everything with tags and priorities.

Core subpackages
----------------

- ``dmp.core``:

  - Logging and monitoring configuration.
  - Ownership and access validation (``dmp.core.access``).
  - SQLModel entities and async repositories (``dmp.core.database``).
  - Request/response I/O schemas (``dmp.core.models.io``).

- ``dmp.server``:

  - The FastAPI application, its routers, guards, middleware and
    exception handlers.

Access model
------------

Every resource lives inside a project. The project owner always has access,
other users only when they hold an explicit grant on the project. Nested
resources (meetings, topics, actions, comments, tags, priorities) are only
reachable through the project they belong to.
"""

# skeleton

A starting point for a small JSON HTTP service built on Flask. It bundles:

- configuration with built-in defaults that environment variables override
- JSON logging to standard output and, optionally, a rotating log file
- an SQLite database (SQLAlchemy) with table creation and seeding on start
- uniform JSON response envelopes for success and error replies
- a small REST client that logs its traffic to a file
- an optional Telegram error notifier
- a Swagger 2.0 description of the API

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
skeleton
```

`skeleton --version` prints the version and build date.

The server listens on the port given by the `PORT` setting (default `9009`).
On SIGINT or SIGTERM it shuts down, disposes of the database engine and exits
with status 1. Responses allow cross-origin requests from any origin for
`GET`, `POST`, `PUT` and `HEAD`; `OPTIONS` preflight requests are answered
with status 204.

Routes:

| Method | Path                     | Reply                                              |
|--------|--------------------------|----------------------------------------------------|
| GET    | `/`                      | `{"type": "success", "message": "OK"}`             |
| GET    | `/ping`                  | `{"type": "success", "message": "PONG"}`           |
| GET    | `/swagger/`              | redirect to `/swagger/index.html`                  |
| GET    | `/swagger/index.html`    | a simple page showing the API description          |
| GET    | `/swagger/doc.json`      | the API description as JSON                        |
| GET    | `/api/v1/example`        | an example record in the `data` field              |

## Configuration

Every setting has a default in `skeleton.config.ENVIRONMENT` and may be
overridden by an environment variable of the same name. The ones the
package reads:

| Name                    | Default                        | Meaning                                              |
|-------------------------|--------------------------------|------------------------------------------------------|
| `APP_NAME`              | `skeleton`                     | logger name; shown in Telegram reports               |
| `PORT`                  | `9009`                         | port to listen on                                    |
| `ENVIRONMENT`           | `development`                  | `staging` and `production` turn off SQL echoing      |
| `LOG_LEVEL`             | `debug`                        | `panic`, `fatal`, `error`, `warning`, `info`, `debug`, `trace`; anything else means `info` |
| `LOG_PATH`              | `./logs/app.log`               | log file; empty to log to standard output only       |
| `LOG_MAX_SIZE`          | `50`                           | megabytes before the log file is rotated             |
| `ENABLE_MIGRATION`      | `true`                         | create tables and load seed data on start            |
| `DB_SQLITE_PATH`        | `./db.sqlite`                  | database file; empty for a shared in-memory database |
| `DB_MAX_IDLE_CONNS`     | `2`                            | connection pool size                                 |
| `DB_MAX_OPEN_CONNS`     | `3`                            | pool size plus overflow; 0 for no limit              |
| `DB_MAX_LIFE_TIME`      | `3600`                         | seconds before a connection is recycled; 0 for never |
| `ENABLE_TELEGRAM_LOG`   | `false`                        | send error reports to a Telegram chat                |
| `TELEGRAM_BOT_ENDPOINT` | `https://api.telegram.org/bot` | bot API base                                         |
| `TELEGRAM_BOT_TOKEN`    | empty                          | bot token                                            |
| `TELEGRAM_BOT_CHATID`   | empty                          | chat to post to                                      |
| `TELEGRAM_BOT_LOG_PATH` | `./logs/telegram.log`          | file the notifier's HTTP calls are logged to         |

Rotated log files are gzipped; at most 8 are kept, and those older than 60
days are removed.

## Using the pieces from code

```python
from skeleton.config import load_config
from skeleton.logger import new_logger
from skeleton.response import ok, fail, error

config = load_config()
log = new_logger(config)

body, status = ok("Saved", {"id": 1})
# body == {"type": "success", "message": "Saved", "data": {"id": 1}}, status == 200

body, status = fail(404, "Not found")
# body == {"type": "error", "message": "Not found"}, status == 404
```

`ok` and `fail` take nothing, a message, data, or message and data in either
order. `error(exc)` turns an exception into an error body with status 400 by
default; a pydantic `ValidationError` is expanded into one `error_data`
entry per failed field.

Other modules:

- `skeleton.application` – `new_application()` builds an `Application`
  holding `config`, `log`, `db` (an SQLAlchemy engine) and `app` (the Flask
  app); `Application.validate(model, data)` validates with a pydantic model.
  `skeleton.routes.register_routes(application)` adds the routes above.
- `skeleton.models` – the `Example` entity; `created_at` and `updated_at`
  are stamped on insert and update.
- `skeleton.dto` – `ExampleRequest` (name and price required and non-zero)
  and `ExampleResponse`.
- `skeleton.database` – `Database.migrate()` and `Database.connect()`;
  `new_database(config, logger)` does both.
- `skeleton.merger` – `merge(source, target)` and `combine(source, base, target)`
  copy fields through their JSON form.
- `skeleton.perflog` – `PerfLogger` logs step and total durations; as a
  context manager it logs the total on exit.
- `skeleton.recovery` – `with recover(logger):` reports and swallows any
  exception raised in the block.
- `skeleton.rest` – `RestClient(log_file, url=..., method=..., ...)`;
  `execute()` returns the body and the status code (0 when no reply came).
  TLS certificates are not verified.
- `skeleton.telelogger` – `TeleLogger.push_error(err)` and `push_string(text)`
  send in a background thread.
- `skeleton.docs` – `swagger_spec()` returns the API description.

## What it does not do

- Only SQLite is supported. `DB_DRIVER`, `DB_HOST`, `DB_PORT`, `DB_USER`,
  `DB_PASS` and `DB_NAME` are present in the defaults, but only `DB_DRIVER`
  is used, and only in a log line.
- `DB_TABLE_PREFIX`, `MAX_BODY_LIMIT`, `LIMITER_MAX_HIT`, `LIMITER_DURATION`,
  `AES`, `SALT`, `TZ` and the other connection timeouts are defaults only:
  nothing reads them, so there is no body size limit and no rate limiting.
- No seed data is defined (`data_seeds()` returns an empty list).
- `/swagger/index.html` is a plain page that prints the JSON description,
  not an interactive API explorer.
# crawlkit

crawlkit is a set of components for building a web crawler. It has three kinds of component:

- **Downloaders** (`crawlkit.downloader.LocalDownloader`) fetch a `Request` and return a `Response`.
- **Analyzers** (`crawlkit.analyzer.LocalAnalyzer`) pass a response to a list of parser functions. The parsers return new requests and items.
- **Pipelines** (`crawlkit.pipeline.LocalPipeline`) pass each item through a chain of processor functions.

Each component keeps four counters:

- how many times it was called,
- how many calls it accepted,
- how many calls it completed,
- how many calls it is handling now.

The counters give each component a load score. A `Registrar` uses the score to choose between components of the same type.

It has no third-party dependencies.

## Installation

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Module IDs

A module ID has the form `<letter><serial>|<ip>:<port>`, for example `D1|127.0.0.1:8080`. The address part is optional. The letter is `D` for a downloader, `A` for an analyzer and `P` for a pipeline.

```python
from crawlkit.maddr import new_addr
from crawlkit.mid import gen_mid, split_mid, legal_mid
from crawlkit.mtype import ModuleType, get_type
from crawlkit.sn import SNGenerator

sn_gen = SNGenerator(1, 0)          # a maximum of 0 means the largest 64-bit value
addr = new_addr("http", "127.0.0.1", 8080)
mid = gen_mid(ModuleType.DOWNLOADER, sn_gen.get(), addr)   # "D1|127.0.0.1:8080"
split_mid(mid)                      # ("D", "1", "127.0.0.1:8080")
legal_mid("M1|127.0.0.1:8080")      # False
get_type(mid)                       # ModuleType.DOWNLOADER
```

`new_addr` accepts only the networks `http` and `https`, together with an IPv4 or IPv6 address. `SNGenerator` starts again from `start` after it hands out `maximum`, and it counts these restarts in `cycle_count`. `crawlkit.mid.DEFAULT_SN_GEN` is a shared generator that starts at 1.

If an argument is invalid, these functions raise `crawlkit.errors.IllegalParameterError`, which is a `ValueError`.

## Data

`crawlkit.data` defines the values that pass between components:

- `Request(http_req, depth)` wraps a `urllib.request.Request`.
- `Response(http_resp, depth)` wraps an `HTTPResponse`. An `HTTPResponse` has `request`, `body`, `status` and `headers`.
- `Item` is a `dict` of scraped fields.

Each of these has a `valid()` method.

## Pipelines

```python
from crawlkit.data import Item
from crawlkit.pipeline import LocalPipeline

def bump(item):
    item["number"] += 1
    return item

pipeline = LocalPipeline("P1|127.0.0.1:8080", [bump, bump])
errors = pipeline.send(Item(number=0))   # [] on success
```

How processors behave:

- A processor returns the item to pass on, or `None` to keep the current item.
- A processor reports an error by raising an exception.
- `send` collects the exceptions and returns them as a list.

If you set `pipeline.fail_fast = True`, the pipeline stops at the first processor that raises. `pipeline.summary().to_dict()` returns the counters, together with the fail-fast flag and the number of processors.

## Analyzers

```python
from crawlkit.analyzer import LocalAnalyzer

def parse(http_resp, depth):
    text = http_resp.body.read().decode()
    return [Item(url=http_resp.request.full_url, length=len(text))], []

analyzer = LocalAnalyzer("A1|127.0.0.1:8080", [parse])
data, errors = analyzer.analyze(response)
```

Each parser receives the HTTP response with a fresh copy of the body, along with the response depth. A parser returns a list of data and a list of errors. The analyzer sets the depth of every `Request` a parser returns to one more than the depth of the response. An exception raised inside a parser is added to the list of errors.

## Downloaders

```python
import urllib.request
from crawlkit.data import Request
from crawlkit.downloader import LocalDownloader

downloader = LocalDownloader("D1|127.0.0.1:8080", urllib.request.build_opener())
response = downloader.download(Request(urllib.request.Request("http://localhost:8000/"), 0))
```

The client can be any object with an `open(request)` method. A response with an HTTP error status is returned like any other response. If the client cannot reach the server, the error it raises is passed on to the caller.

## Registrar

```python
from crawlkit.registrar import Registrar
from crawlkit.mtype import ModuleType

registrar = Registrar()
registrar.register(pipeline)                # False if the ID is already registered
best = registrar.get(ModuleType.PIPELINE)   # the instance with the lowest score
registrar.unregister(pipeline.id)
```

`register` checks that the letter in a component's ID matches the component's type. If no instance of the requested type is registered, `get` and `get_all_by_type` raise `crawlkit.errors.NotFoundModuleInstanceError`.

To compute scores, the registrar calls `crawlkit.score.set_score`. This uses the component's own score calculator. If the component has none, it uses `calculate_score_simple`.

## Errors

Component errors are `crawlkit.errors.CrawlerError` instances. Each one carries an `ErrorType` (`DOWNLOADER`, `ANALYZER` or `PIPELINE`), and its message reads `crawler error: <type> error: <message>`. `CrawlerError.from_error` wraps another exception and keeps it as the cause.

## What it does not do

crawlkit provides the components only. It has:

- no scheduler that drives a crawl from start to finish,
- no command-line tool,
- no storage for the items a pipeline receives.

To connect a downloader, an analyzer and a pipeline into a crawl, you write your own loop.
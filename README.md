# abyssal_watcher

A small toolkit for spotting suspicious payloads and recording what it found.
It combines several simple substring-based detectors, keeps an in-memory
cache of known threats, checks signatures against a JSON signature database
and writes AES-256-GCM encrypted audit records.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line use

Scan a payload through every detection layer:

```
abyssal-watcher-scan [DATA] [--log PATH] [--status-path PATH]
```

- `DATA` is the payload to scan; it defaults to
  `memory_injection polymorphic xor_loop shellcode`.
- `--log` is the encrypted log file to append to (default `secure.log`).
- `--status-path` is the process status file read to detect a tracer
  (default `/proc/self/status`).

If the status file reports a non-zero `TracerPid`, the scanner prints
`[ALERT] Debugger detected. Exiting.` and stops. Otherwise it activates the
zero-exposure protection layer, appends an encrypted boot record to the log,
scans the payload, prints `[ALERT] Multi-layer threat detected.` or
`[OK] System is clean.`, and appends an encrypted record of the result.

## Library use

```python
from abyssal_watcher.ml_analyzer import analyze_behavior
from abyssal_watcher.threat_detector import detect_anomaly
from abyssal_watcher.ze_mode import ZEProtector
from abyssal_watcher.scanner import scan

analyze_behavior("shellcode xor_loop")      # True
detect_anomaly("polymorphic loader")        # True
ZEProtector.inspect("remote exploit")       # True
scan("hello world")                         # False
```

Other building blocks:

- `abyssal_watcher.signatures.ThreatAnalyzer` looks up named events
  (`analyze`) among its `Signature` records and turns their severity into a
  score (`score`, ten times the severity, 0 for unknown events).
- `abyssal_watcher.threat_cache` remembers signatures with `learn_threat`
  and answers `is_known_threat`.
- `abyssal_watcher.anomaly.Anomaly` checks a signature against a JSON
  signature database (`{"signatures": [...]}`) loaded by `load_signatures`,
  by default from `data/anomaly_signatures.json`; `respond` logs the result.
- `abyssal_watcher.anti_debug.is_debugger_present` reads a process status
  file and reports whether a tracer is attached.
- `abyssal_watcher.watcher.Watcher` runs a `CheckStrategy` such as
  `DefaultCheck` through `monitor`, only once at least two whole seconds have
  passed since the last run.
- `abyssal_watcher.engine.Engine` runs a strategy periodically on the
  asyncio event loop (every two seconds by default); `start`, `trigger` and
  `stop` control it.
- `abyssal_watcher.event_bus.EventBus` delivers payloads to handlers
  registered with `subscribe` when `emit` is called.
- `abyssal_watcher.secure_logger.log_secure` encrypts a message with
  AES-256-GCM using a fresh key and nonce from
  `abyssal_watcher.secure_kms` and appends the ciphertext to a log file.
- `abyssal_watcher.logger.init_logger` sets up timestamped console logging;
  `abyssal_watcher.logs.init_syslog` forwards records to the local syslog
  socket when one answers, and `log_threat` / `log_warning` write to it.

## What it does not do

The package has no HTTP server or API: other services cannot report threats
to it over the network. Detection is by fixed substrings only. The keys used
by `log_secure` are generated per message and never stored, so the records in
the encrypted log cannot be read back.
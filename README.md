# statusblocks

`statusblocks` is a library of small building blocks for status bar blocks. Each module covers one kind of block. A module reads the block's data source, turns the data into values, and picks a `statusblocks.core.State` (`IDLE`, `INFO`, `GOOD`, `WARNING` or `CRITICAL`) from thresholds you pass in.

The package needs nothing outside the standard library.

## Modules

| Module | What it provides |
|--------|------------------|
| `statusblocks.core` | The `State` and `MouseButton` enums, and `worst_state()` |
| `statusblocks.memory` | `read_memstate()` parses `/proc/meminfo` and adds the ZFS ARC size when it can be read. `memory_values()` gives byte and percentage values. `memory_state()` picks a state |
| `statusblocks.uptime` | `read_uptime()` reads `/proc/uptime`. `format_uptime()` shows it in its two largest units, for example `"1d 1h"` |
| `statusblocks.maildir` | `count_mails()` and `count_inboxes()` count messages in `new`, `cur` or both (`MailType`). `expand_inbox()` expands `~` and `$VARS`. `mail_state()` picks a state |
| `statusblocks.rofication` | `rofication_status()` asks the rofication daemon over its Unix socket. `parse_response()` and `rofication_state()` work on the reply |
| `statusblocks.music` | MPRIS bus-name filtering (`extract_player_name`, `player_matches`, `compile_excludes`), player selection (`select_initial`, `next_index`, `index_after_removal`) and `player_values()` for a `Player` |
| `statusblocks.speedtest` | `run_speedtest()` runs `speedtest-cli --json`. `parse_output()` and `speedtest_values()` turn the output into values |
| `statusblocks.net` | `SpeedTracker` turns successive rx/tx byte counters into speeds and keeps an 8-sample history. `push_to_hist()` |
| `statusblocks.nvidia_gpu` | `parse_gpu_info()` reads one `nvidia-smi` CSV line. `nvidia_smi_args()` builds the `nvidia-smi` command line. `gpu_state()` picks a state. `set_fan_speed()` and `fan_speed_args()` drive `nvidia-settings` |
| `statusblocks.toggle` | `ToggleConfig`, `check_state()` and `toggle()` run shell commands through `default_shell()` (`$SHELL` or `sh`) |
| `statusblocks.pacman` | `get_pacman_available_updates()` (through `fakeroot pacman` on a scratch database), `get_aur_available_updates()`, counting, regex matching, `watched_for()`, `update_state()` and `format_for_count()` |
| `statusblocks.taskwarrior` | `get_number_of_tasks()` runs `task rc.gc=off <filter> count`. Also `Filter`, `default_filters()`, `task_state()` and `task_flags()` |
| `statusblocks.alsa` | `AlsaDevice` reads and changes volume and mute with `amixer`, and waits for changes with `alsactl monitor`. Also `parse_amixer_output()`, `amixer_args()` and `new_volume()` |
| `statusblocks.sound` | `volume_icon()` picks icon names, with optional headphone detection. Also `clamp_step()`, `map_output_name()`, `DeviceKind` and `SoundDriver` |
| `statusblocks.temperature` | `TemperatureScale`, `temperature_thresholds()`, `summarize()` (min/avg/max), `in_range()` and `temperature_state()` |
| `statusblocks.weather` | `WeatherResult.values()`, `convert_wind_direction()`, `australian_apparent_temp()`, and IP geolocation via ipapi.co (`find_ip_location()`, `parse_ip_location()`) |
| `statusblocks.watson` | `parse_state()` reads a Watson state file. Also `WatsonState.format()`, `format_delta_past()`, `format_delta_after()` and `default_state_path()` |

## Installation

```sh
pip install .
```

Some functions run external programs. Install the ones you need:

- `statusblocks.alsa` uses `amixer` and `alsactl`.
- `statusblocks.nvidia_gpu` uses `nvidia-settings`.
- `statusblocks.pacman` uses `fakeroot`, `pacman` and `sh`.
- `statusblocks.taskwarrior` uses `task`.
- `statusblocks.speedtest` uses `speedtest-cli`.

`statusblocks.toggle` runs commands through your shell.

## Examples

```python
from statusblocks.uptime import format_uptime
from statusblocks.memory import level_state

format_uptime(90061)            # "1d 1h"
level_state(85.0, 80.0, 95.0)   # State.WARNING
```

```python
from statusblocks.music import extract_player_name, player_matches, compile_excludes

extract_player_name("org.mpris.MediaPlayer2.firefox.instance852")  # "firefox.instance852"
player_matches(
    "org.mpris.MediaPlayer2.playerctld",
    [],
    compile_excludes(["mpd", "firefox.*"]),
)  # True
```

## What the package does not do

This is a library, not a status bar. It has:

- no program or command to run;
- no configuration file loading;
- no format-string rendering;
- no widget output or click-event loop.

Some data sources are not read at all; you supply the inputs:

- `statusblocks.music` does not talk to D-Bus. You build `Player` objects yourself.
- `statusblocks.net` does not discover interfaces or read their counters.
- `statusblocks.temperature` does not read hardware sensors.
- `statusblocks.nvidia_gpu` builds the `nvidia-smi` command line and parses its lines, but does not run it.
- `statusblocks.sound` has no PulseAudio support. The only device implementation is `statusblocks.alsa.AlsaDevice`.
- `statusblocks.weather` contains no weather service clients. It only holds results, wind direction, apparent temperature and IP location.

## Running the tests

```sh
pip install .[test]
pytest
```
# embkit

Small, dependency-free building blocks in the style of microcontroller
firmware, usable from plain Python:

- `embkit.buffer`: a fixed-capacity circular byte buffer (`CircularBuffer`).
- `embkit.msgqueue`: a fixed-capacity FIFO that stores copies of the items
  written to it (`MessageQueue`, `Message`).
- `embkit.bits`: 8-bit masking, shifting and single-bit helpers.
- `embkit.scheduler`: a cooperative, tick-driven task scheduler with
  one-shot software timers (`Scheduler`, `Task`, `Timer`, `milliseconds`).
- `embkit.rtcc`: a software real-time clock and calendar with one alarm
  (`Rtcc`, `zeller_weekday`).
- `embkit.dates`: time and date validation, weekday calculation and formatting.
- `embkit.frames`: single-frame packing and little-endian record packing
  (`WordRecord`, `PackedRecord`).
- `embkit.games`: a digit-by-digit door password state machine
  (`PasswordMachine`) and a guess-the-number game (`GuessGame`).
- `embkit.app`: a clock application that wires the scheduler, the clock and a
  message queue together (`ClockApp`).
- `embkit.arrayops`: assorted numeric and sequence helpers.

Python 3.10 or later; no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line programs

```
embkit-clock [--timeout MS] [--tick MS]
```

Runs the clock application. The clock starts at 23:59:58 on 31/12/1984; a
1000 ms task advances it one second and posts the time and date to a queue of
six entries, and a 500 ms task prints each reading as `Time - h:m:s` and
`Date - d/m/y`. The program keeps ticking while the process's CPU time, in
milliseconds, has not passed `--timeout` (default 999999); `--tick` sets the
tick (default 100).

```
embkit-games password
embkit-games guess [--secret N]
```

`password` asks for digits one at a time; `36579` opens door 1 and `36581`
opens door 2, and any wrong digit starts over. `guess` picks a number from 0
to 999 (or uses `--secret`) and tells you whether each guess is too low or too
high; after a miss it asks whether to go on (`y` or `n`).

## Quick tour

### Circular buffer

```python
from embkit.buffer import CircularBuffer, BufferFullError

buf = CircularBuffer(3)
buf.write(0x23)
buf.write(0x24)
buf.write(0x25)
assert buf.is_full()

try:
    buf.write(0x26)
except BufferFullError:
    pass

first = buf.read()          # 0x23, oldest first
rest = list(buf.drain())    # [0x24, 0x25]
assert buf.is_empty()
```

Values must be 0 to 255 (`ValueError` otherwise). Reading from an empty
buffer raises `BufferEmptyError`. `capacity`, `head` and `tail` are read-only
properties.

### Message queue

```python
from embkit.msgqueue import Message, MessageQueue

queue = MessageQueue(10)
queue.write(Message(msg=1, value=100))
queue.write(Message(msg=2, value=200))
print(len(queue))           # 2

while not queue.is_empty():
    item = queue.read()
    print(item.msg, item.value)

queue.flush()               # discard anything left
```

A full queue raises `QueueFullError` on `write`; an empty one raises
`QueueEmptyError` on `read`. Any object can be queued; a shallow copy is
stored.

### Bits and bytes

```python
from embkit import bits

bits.shift_left(0xFF, 4)     # 0xF0
bits.shift_right(0xFF, 4)    # 0x0F
bits.set_mask(0x01, 0x0A)    # 0x0B
bits.clear_mask(0xFF, 0x0F)  # 0xF0
bits.toggle_mask(0xAA, 0xFF) # 0x55
bits.set_bit(0x00, 4)        # 0x10
bits.clear_bit(0xFF, 7)      # 0x7F
bits.toggle_bit(0xFF, 4)     # 0xEF
bits.get_bit(0xAA, 3)        # 1
bits.format_binary(0x0A)     # "0b00001010"
```

Results are kept to 8 bits.

### Scheduler and software timers

Periods and timeouts are in milliseconds and must be whole multiples of the
tick; otherwise, or when the task or timer slots are used up,
`SchedulerError` is raised. Ids are counted from 1.

```python
from embkit.scheduler import Scheduler

sched = Scheduler(tick=100, timeout=3000, max_tasks=1, max_timers=1)

def init_fast():
    print("init fast task")

def fast():
    print("every 500 ms")

task_id = sched.register_task(init_fast, fast, 500)

def on_timeout():
    print("timer expired")
    sched.start_timer(timer_id)   # re-arm

timer_id = sched.register_timer(1000, on_timeout)
sched.start_timer(timer_id)

sched.start()
```

`start()` runs every init function, then polls the clock in a busy loop and
calls `step()` each time a tick has passed, for as long as the last tick's
clock reading is not beyond `timeout`. The default clock is
`milliseconds()`, the process's CPU time in milliseconds; pass
`clock=` to use another.

Tasks can be paused and resumed with `stop_task` / `start_task` and
re-timed with `set_period` (which returns whether the task is stopped).
Timers are one-shot: `start_timer` loads the timeout, each tick counts it
down, and the callback fires when it reaches zero. `get_timer` returns the
remaining count, `reload_timer` sets a new timeout (restarting a running
count), and `stop_timer` pauses a timer. `run_init`, `step`, `run_tasks` and
`run_timers` drive the scheduler by hand, one tick at a time.

### Real-time clock and calendar

```python
from embkit.rtcc import Rtcc, zeller_weekday

clock = Rtcc()                  # 00:00:00, 1/1/1900
clock.set_time(23, 59, 58)
clock.set_date(31, 12, 1984)
clock.set_alarm(7, 30)

clock.tick()                    # advance one second
clock.tick()                    # rolls over into 1 January 1985

print(clock.current_time())     # (0, 0, 0)
print(clock.current_date())     # (day, month, year, weekday)
print(clock.alarm())            # (7, 30)
```

Out-of-range values raise `ValueError`; years run from 1900 to 2100 and
leap years follow the Gregorian rule. `zeller_weekday(day, month, year)` and
the weekday in `current_date()` use 0 = Saturday through 6 = Friday.
`control` gives the flags as a register (bit 0 clock enable, bit 1 alarm set,
bit 2 alarm active). `clear_alarm()` resets the alarm to 00:00 when it
matches the current hour and minute.

### Dates and strings

```python
from embkit import dates

dates.time_string(15, 30, 0)       # "15:30:00"
dates.alarm_string(15, 55)         # "ALARM=15:55"
dates.date_string(8, 31, 2000, 3)  # "Aug 31, 2000 We\n"
dates.week_day(31, 8, 2000)        # 4 (1 = Monday ... 7 = Sunday)
dates.validate_date(29, 2, 2024)   # True
dates.validate_time(12, 30, 15)    # True
dates.seconds_since_twelve(1, 2, 3)  # 3723
```

`is_leap_year` and `validate_date` treat every year divisible by four as a
leap year, and `validate_date` allows up to 31 days in every month other than
February. `validate_time` accepts hours up to 24 and minutes and seconds up
to 60.

### Frames and packed records

```python
from embkit import frames

frames.single_frame_tx([2, 3, 4, 5, 0, 0, 0, 0], 4)
# b"\x04\x02\x03\x04\x05\x00\x00\x00"

size, payload = frames.single_frame_rx([0x04, 0x02, 0x03, 0x04, 0x05, 0xAA, 0x00, 0xFF])
# 4, b"\x02\x03\x04\x05\x00\x00\x00\x00"

record = frames.unpack_record(bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66, 0x77]))
# WordRecord(word=0x44332211, byte=0x55, hword=0x7766)

wire = frames.pack_record(
    frames.PackedRecord(word1=0x11223344, word2=0x88990011, byte=0x55, hword=0x6677)
)
# 11 bytes: word1, byte, hword, word2, little-endian
```

Frames are exactly 8 bytes; bad lengths or out-of-range values raise
`ValueError`.

### Games as a library

```python
from embkit.games import GuessGame, Hint, PasswordMachine, PasswordState

machine = PasswordMachine()
for digit in (3, 6, 5, 8, 1):
    state = machine.enter(digit)
assert state is PasswordState.OPEN_DOOR2 and machine.door == 2

game = GuessGame(secret=42)
assert game.guess(10) is Hint.TOO_LOW
assert game.guess(42) is Hint.CORRECT
```

### Array helpers

```python
from embkit import arrayops

arrayops.gcd(12, 18)                                   # 6
arrayops.median([1, 2, 3, 4, 5, 6, 7, 8, 9])           # 5
arrayops.bubble_sort([1, 3, 5, 4, 2])                  # [1, 2, 3, 4, 5]
arrayops.is_prime(7)                                   # True
arrayops.count_occurrences([1, 2, 3, 4, 2, 5, 2, 6], 2)  # 3
arrayops.average([9, 9, 10, 9, 9])                     # 9.2
arrayops.arithmetic(7, -2)                             # (5, -14, 9, -3, 1)
```

Also available: `larger`, `miles_per_gallon`, `combined_mpg`,
`sum_sequence` (wraps at 16 bits), `integer_power`, `is_multiple`,
`is_even`, `square`, `reverse`, `count_divisible`, `parity_flags`,
`arrays_equal` and `largest`.

## What the package does not do

- It does not talk to hardware: there are no device drivers, interrupts or
  real timers; the scheduler runs in a busy loop on the process clock.
- The clock never raises its alarm by itself: `alarm_active()` reports a flag
  that nothing in the package sets, so alarms are stored but not triggered.
- Nothing is saved: buffers, queues, clock settings and game state live only
  in memory.
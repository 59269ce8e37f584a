# zxinterceptor

A small side-scrolling space shooter played out on an emulated 32 x 24
character-cell screen. An interceptor flies on the left of the screen, space
mines and an enemy ship come in from the right, and money is earned by
shooting the enemy ship and the mines.

Everything the game needs from the outside world - keys, random numbers,
sound - is passed in, so a whole game can be driven and inspected from code.

## The command

```
pip install .
zxinterceptor --seed 1 --steps 500
```

`zxinterceptor` runs the game headless for a number of frames and then prints
the final contents of the screen, one line per row. Cells holding picture
tiles (codes 128 and up) are printed as `#`.

Options:

| Option          | Meaning                                                  |
|-----------------|----------------------------------------------------------|
| `--seed N`      | seed for the random source (unpredictable if left out)   |
| `--steps N`     | number of frames to run, default 500                     |
| `--stress-test` | take random damage of 0 to 30 every in-game frame        |
| `--hold KEY`    | hold `w`, `s` or `space` down; may be given more than once |

## How a game goes

The game cycles through three screens, each a
`zxinterceptor.statemachine.StateController` run by a `StateMachine`:

1. **Title** (`zxinterceptor.screens.TitleScreenStateController`) - draws the
   logo, the title and the controls, then waits for a key.
2. **In game** (`zxinterceptor.ingame.InGameStateController`) - the ship
   starts with 100 health and 0 money; a status line
   (`zxinterceptor.ui.format_status`) shows both on the bottom row.
3. **Game over** (`zxinterceptor.screens.GameOverStateController`) - draws
   the game-over picture and the money earned, waits for all keys to be let
   go and then for a key, and returns to the in-game screen. In stress-test
   mode it does not wait.

Controls, read by `zxinterceptor.input.InputController`:

| Key     | Action                                  |
|---------|-----------------------------------------|
| `W`     | move up 4 pixels                        |
| `S`     | move down 4 pixels (W wins if both held) |
| `Space` | fire                                    |

Scoring and damage:

- a space mine hitting the ship costs 20 health;
- an enemy bullet hitting the ship costs 10 health;
- shooting the enemy ship earns 100$;
- shooting a space mine earns 10$.

The game ends when the ship's health drops to zero or below.

## Using it as a library

- `zxinterceptor.app.Game(keyboard, rng, speaker, stress_test)` - a whole
  game; `step()` advances it by one frame and `run(max_steps)` steps it while
  it runs, at most `max_steps` times, returning the number of steps taken.
  `Game.renderer.screen` is the screen it draws on.
- `zxinterceptor.input.ScriptedKeyboard` - keys are held with `press` and let
  go with `release`. `wait_key` returns at once; `wait_no_key` releases every
  held key. Both count how often they were called.
- `zxinterceptor.rng.RandomSource` - `rand()` returns 0..32767. It takes an
  integer seed, `None`, or a non-empty sequence of values that it replays in a
  loop.
- `zxinterceptor.sound.Speaker` - records every beep as a `Tone(duration,
  pitch)` in its `played` list.
- `zxinterceptor.screen.TileScreen` - the character-cell screen. It holds
  8 x 8 tile patterns (`define_tile`, `tile`), prints control-coded strings
  (`print_string`, clipped at the edges) and reads back with `cell` and
  `row_text`.
- `zxinterceptor.renderer.Renderer` - draws up to sixteen game objects,
  full-screen pictures and text onto a `TileScreen`.
- `zxinterceptor.collider.is_colliding(a, b)` - whether two 16 x 16 sprite
  boxes touch or overlap.
- `zxinterceptor.images.named_images()` - the built-in pictures under the
  keys `"title"`, `"in_game"` and `"game_over"`.

## Demos

`zxinterceptor.demos` describes a few small sprite pieces as lists of
`SpriteFrame` values: a running figure (`runner_frames(count)`), a bubble
crossing the screen (`bubble_frames(count)`, `coloured_bubble_frames(count)`)
and a still circle (`circle_frames()`). `mandelbrot(width, height)` returns
the set of points plotted for a picture of the Mandelbrot set.

## What it does not do

The package has no live display and does not read a real keyboard or play
real sound. Sprites are kept as positions rather than drawn into the cells,
and the command only shows the screen as it stands after the last frame.
Interactive play needs a front end that feeds a `ScriptedKeyboard` and draws
the `TileScreen` and sprite positions, and the package does not include one.

## Running the tests

```
pip install ".[test]"
pytest
```
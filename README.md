# smogshooter

A small top-down arcade shooter built on pygame. You steer a hero around
a map and fire at monsters that walk in from the map's edges. Each monster
you bring down scores 100 points. The game ends when your health runs out,
and you go back to the main page.

The air decides how hard the monsters are. When a game starts, it reads a
PM2.5 reading from a CSV file and picks a difficulty from it:

| PM2.5 (µg/m³)  | Difficulty | Monster health | Monster attack | Monster speed |
|----------------|------------|----------------|----------------|---------------|
| below 15.4     | easy       | 2              | 1              | 1             |
| 15.4 – 35.4    | midium     | 3              | 1              | 1             |
| 35.4 – 54.4    | hard       | 3              | 2              | 2             |
| 54.4 and above | very hard  | 5              | 2              | 2             |

A reading that is negative or cannot be parsed counts as easy.

## Installing

```
pip install .
```

## Playing

```
smogshooter [--data PATH] [--assets DIR]
```

- `--data` is the PM2.5 data file. The default is
  `./getPM25/PM25_Tainan.csv`. Only its first line is read, in the form
  `year,month,day,pm25`, for example `2024,05,01,21.3`. If the file is
  missing, the game stops with an error.
- `--assets` is the directory that holds the artwork. The default is
  `./assets`. It must contain:
  - the font `ARIAL.TTF`
  - `map.png` and `empty.png`
  - the hero's sheets `s-front.png`, `s-right.png`, `s-back.png`,
    `s-left.png`, `s-idle.png`, `s-front_attack.png`,
    `s-right_attack.png`, `s-left_attack.png` and the bullet `s-bullet.png`
  - the monsters' sheets `m-front.png`, `m-right.png`, `m-back.png`,
    `m-left.png`, `m-front_attack.png`, `m-right_attack.png`,
    `m-left_attack.png` and the bullet `m-bullet.png`

  If the font cannot be loaded, the game raises `RuntimeError("Error loading font")`.

The main page has three buttons: **Play**, **Character** and **Exit**.
The Character page has only a **Quit** button, which goes back to the main
page.

While playing:

- **Click** on the map to walk to that point.
- Press **A** to fire toward the mouse pointer. A shot lasts 1.5 seconds.
  After it, you must wait half a second before the next one.
- Monsters chase you and fire when they are within 150 units. A monster's
  shot lasts 2 seconds and the monster then rests for 5 seconds.
- After you are hit, you cannot be hit again for two seconds.
- Monsters appear at random points on the map's edge, with a chance of
  one in 70,000 on each frame.
- **Quit** in the lower-left corner goes back to the main page.

Your score, your health and the difficulty are shown in the lower-right
corner.

## Using it from Python

```python
from smogshooter.data_manager import DataManager, Difficulty, determine_difficulty, parse_record

determine_difficulty(40.0)          # Difficulty.HARD
Difficulty.HARD.label               # "hard"
parse_record("2024,05,01,21.3")     # ("2024/05/01", 21.3)

manager = DataManager("readings.csv")
manager.date, manager.pm25, manager.difficulty
```

`smogshooter.game.Game(data_path, asset_dir)` opens the window. Its
`run()` method plays until the window is closed. `smogshooter.game.main()`
is the function that the `smogshooter` command calls.

The screens are `MainPage`, `CharacterPage` and `GamePlayPage` in
`smogshooter.pages`. The hero and the monsters are `Character` and `Enemy`
in `smogshooter.actors`.

## What it does not do

- The game does not fetch air-quality readings. The CSV file must already
  be in place.
- The Character page shows no character details. It has only its Quit
  button.
- Scores are not saved between games.

## Running the tests

```
pip install .[test]
pytest
```
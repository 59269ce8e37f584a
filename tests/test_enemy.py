from zxinterceptor.enemy import EnemyCommand, EnemyController
from zxinterceptor.renderer import Renderer
from zxinterceptor.rng import RandomSource
from zxinterceptor.sound import Speaker, Tone


def make(values):
    renderer = Renderer()
    speaker = Speaker()
    return renderer, speaker, EnemyController(renderer, RandomSource(values), speaker)


def visible(controller, x, y):
    controller.enemy.x, controller.enemy.y = x, y
    return controller.enemy


def test_starts_hidden_and_drawn():
    renderer, _, enemy = make([5000])
    assert enemy.enemy.is_hidden()
    assert enemy.bullet.is_hidden()
    assert enemy.enemy_command is EnemyCommand.STAY
    assert renderer.game_objects[:2] == [enemy.enemy, enemy.bullet]


def test_step_spawns_enemy_on_low_roll():
    _, speaker, enemy = make([100, 5, 5000])
    enemy.step()
    assert (enemy.enemy.x, enemy.enemy.y) == (240, 5)
    assert enemy.enemy_command is EnemyCommand.STAY
    assert enemy.bullet.is_hidden()
    assert speaker.played == []


def test_step_keeps_enemy_hidden_on_high_roll():
    _, _, enemy = make([5000])
    enemy.step()
    assert enemy.enemy.is_hidden()


def test_fire_and_change_command():
    _, speaker, enemy = make([500, 4000, 2])
    ship = visible(enemy, 100, 50)
    enemy.enemy_step_if_needed()
    assert (enemy.bullet.x, enemy.bullet.y) == (100, 50)
    assert speaker.played == [Tone(6, 200)]
    assert enemy.enemy_command is EnemyCommand.MOVE_DOWN
    assert ship.y == 50 + 1


def test_no_fire_on_low_second_roll():
    _, speaker, enemy = make([500, 100, 0])
    visible(enemy, 100, 50)
    enemy.enemy_step_if_needed()
    assert enemy.bullet.is_hidden()
    assert speaker.played == []
    assert enemy.enemy_command is EnemyCommand.STAY


def test_move_limits():
    _, _, enemy = make([5000])
    ship = visible(enemy, 100, 0)
    enemy.enemy_command = EnemyCommand.MOVE_UP
    enemy.enemy_step_if_needed()
    assert ship.y == 0
    ship.y = 160
    enemy.enemy_command = EnemyCommand.MOVE_DOWN
    enemy.enemy_step_if_needed()
    assert ship.y == 160


def test_count_command_does_not_move():
    _, _, enemy = make([1500, 3])
    ship = visible(enemy, 100, 40)
    enemy.enemy_step_if_needed()
    assert enemy.enemy_command is EnemyCommand.COUNT
    assert ship.y == 40


def test_bullet_flies_left_then_hides():
    _, _, enemy = make([5000])
    enemy.bullet.x, enemy.bullet.y = 20, 30
    enemy.bullet_fly_if_needed()
    assert enemy.bullet.x == 20 - 8
    enemy.bullet.x = 8
    enemy.bullet_fly_if_needed()
    assert enemy.bullet.is_hidden()


def test_put_enemy_ignored_when_visible():
    _, _, enemy = make([5])
    ship = visible(enemy, 60, 70)
    enemy.put_enemy_if_needed()
    assert (ship.x, ship.y) == (60, 70)


def test_close_removes_from_renderer():
    renderer, _, enemy = make([5000])
    enemy.close()
    assert renderer.game_objects[:2] == [None, None]
    assert enemy.enemy.sprite.deleted
    assert enemy.bullet.sprite.deleted
import numpy as np
import copy
import pprint
from collections import defaultdict


DOORS = (1, 2, 3)
CAR = 'car'
GOAT = 'goat'
STRATEGIES = ('stay', 'switch')
OUTCOMES = ('WIN', 'LOSE')

DEFAULT_CONFIG = {
    'games': 100,
    'seed': None,
    'verbose': 1,
}


def _get_rng(rng):
    # the numpy default is quite good (PCG64)
    return rng if rng is not None else np.random.default_rng()


def validate_game(game):
    """Raise ValueError unless game is 3 doors holding one car and two goats"""
    if len(game) != len(DOORS):
        raise ValueError(f"A game needs {len(DOORS)} doors, got {len(game)}")
    labels = list(game)
    unknown = [label for label in labels if label not in (CAR, GOAT)]
    if unknown:
        raise ValueError(f"Unknown door labels {unknown}")
    if labels.count(CAR) != 1:
        raise ValueError(f"A game needs exactly one {CAR}, got {labels.count(CAR)}")


def validate_door(door, name='door'):
    if isinstance(door, (bool, np.bool_)) or not isinstance(door, (int, np.integer)):
        raise ValueError(f"{name} must be an integer door index, got {door!r}")
    if door not in DOORS:
        raise ValueError(f"{name} must be one of {DOORS}, got {door}")


def create_game(rng=None):
    """Place one car and two goats behind the doors, car position uniform
    Returns a list of labels where position i is door i + 1
    """
    rng = _get_rng(rng)
    # N objects, choose all of them without replacement
    return [str(label) for label in rng.choice([GOAT, GOAT, CAR], size=3, replace=False)]


def select_door(rng=None):
    return int(_get_rng(rng).choice(DOORS))


def open_goat_door(game, pick, rng=None):
    """Host opens a goat door that isn't the contestant's pick
    If the pick hides the car there are two goats to choose from at random,
    otherwise the only door left that is neither the car nor the pick is opened.
    """
    validate_game(game)
    validate_door(pick, 'pick')
    if game[pick - 1] == CAR:
        options = [door for door in DOORS if game[door - 1] == GOAT]
        return int(_get_rng(rng).choice(options))
    options = [door for door in DOORS if game[door - 1] != CAR and door != pick]
    return options[0]


def change_door(stay, opened_door, pick):
    """Final pick for the stay (stay=True) or switch (stay=False) strategy"""
    if not isinstance(stay, (bool, np.bool_)):
        raise ValueError(f"stay must be True or False, got {stay!r}")
    validate_door(opened_door, 'opened_door')
    validate_door(pick, 'pick')
    if opened_door == pick:
        raise ValueError(f"Host cannot open the contestant's pick ({pick})")

    if stay:
        return pick
    return [door for door in DOORS if door not in (opened_door, pick)][0]


def determine_winner(final_pick, game):
    validate_game(game)
    validate_door(final_pick, 'final_pick')
    return 'WIN' if game[final_pick - 1] == CAR else 'LOSE'


class Game:
    def __init__(self, rng=None, verbose=0):
        """Set up a single game
        rng: random number generator, anything with numpy's Generator.choice
        verbose: set to 2 for a per-game trace
        """
        self.rng = _get_rng(rng)
        self.verbose = verbose

        self.doors = create_game(self.rng)
        self.choice = None    # Contestant's initial pick
        self.opened = None    # Door revealed by the host
        self.results = []     # (strategy, outcome) pairs once played

        # Mirror of the doors: where the prize is and what the host has shown
        self.state = {
            'prizes': np.array([label == CAR for label in self.doors], dtype=bool),
            'visible': np.zeros(len(DOORS), dtype=bool),
        }

    def pstate(self):
        print(f"doors: {self.doors}  pick: {self.choice}  opened: {self.opened}")
        pprint.pprint(self.state)

    def choose(self):
        self.choice = select_door(self.rng)

    def reveal(self):
        self.opened = open_goat_door(self.doors, self.choice, self.rng)
        self.state['visible'][self.opened - 1] = True

    def play(self):
        """A standard game is:
            1) choose door randomly
            2) host reveals a goat
            3) resolve both stay and switch against the same doors
            """
        self.choose()
        self.reveal()

        self.results = []
        for strategy in STRATEGIES:
            final = change_door(strategy == 'stay', self.opened, self.choice)
            self.results.append((strategy, determine_winner(final, self.doors)))

        if self.verbose > 1:
            self.pstate()
            print(f"results: {self.results}")
        return self.results


def play_game(rng=None, verbose=0):
    return Game(rng=rng, verbose=verbose).play()


def win_proportions(results, decimals=2):
    """Row proportions of outcomes per strategy, rounded for reporting

    results: sequence of (strategy, outcome) pairs
    Returns {strategy: {'WIN': p, 'LOSE': q}} for the strategies present
    """
    if not len(results):
        raise ValueError("No trial results to summarize")

    counts = {strategy: defaultdict(int) for strategy in STRATEGIES}
    for strategy, outcome in results:
        if strategy not in STRATEGIES:
            raise ValueError(f"Strategy not supported {strategy!r}")
        if outcome not in OUTCOMES:
            raise ValueError(f"Outcome not supported {outcome!r}")
        counts[strategy][outcome] += 1

    proportions = {}
    for strategy, tally in counts.items():
        total = sum(tally.values())
        if total:
            proportions[strategy] = {outcome: round(tally[outcome] / total, decimals)
                                     for outcome in OUTCOMES}
    return proportions


def format_summary(proportions):
    # Columns in alphabetical order, like R's table()
    columns = sorted(OUTCOMES)
    lines = [f"{'strategy':<10}" + ''.join(f"{col:>6}" for col in columns)]
    for strategy, row in proportions.items():
        lines.append(f"{strategy:<10}" + ''.join(f"{row[col]:>6.2f}" for col in columns))
    return '\n'.join(lines)


class GameSeries:
    def __init__(self, config=None, rng=None):
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.config.update(copy.deepcopy(config or {}))
        self.rng = rng if rng is not None else np.random.default_rng(self.config['seed'])

        # Data collection
        self.history = []
        self.stats = defaultdict(int)

    @property
    def verbose(self):
        return self.config.get('verbose', 0)

    def header(self):
        print(f"\n--- Simulating {self.config['games']} games, "
              f"strategies: {' vs '.join(STRATEGIES)} ---")

    def proportions(self, decimals=2):
        return win_proportions(self.history, decimals)

    def pstats(self):
        for strategy in STRATEGIES:
            wins = self.stats[f"{strategy}_wins"]
            total = self.stats[strategy]
            if total:
                print(f"{strategy}: won {wins} / {total} for {100 * wins / total:.1f}%")
        print(format_summary(self.proportions()))

    def simulate(self, n=None):
        n = self.config['games'] if n is None else n
        if isinstance(n, (bool, np.bool_)) or not isinstance(n, (int, np.integer)) or n < 1:
            raise ValueError(f"Number of games must be a positive integer, got {n!r}")

        for game_idx in range(n):
            if self.verbose > 1:
                print(f"---Game {game_idx + 1}")
            results = play_game(rng=self.rng, verbose=self.verbose)
            self.history.extend(results)
            for strategy, outcome in results:
                self.stats[strategy] += 1
                self.stats[f"{strategy}_wins"] += (outcome == 'WIN')
        return self.history


def play_n_games(n=100, rng=None, verbose=1):
    """Play n games and return the 2n (strategy, outcome) results
    With verbose set, prints the rounded win/lose proportions per strategy.
    """
    series = GameSeries({'games': n, 'verbose': verbose}, rng=rng)
    if verbose:
        series.header()
    series.simulate()
    if verbose:
        series.pstats()
    return series.history

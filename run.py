from montyhall import GameSeries

config = {
    'games': 10000,
    # None draws fresh entropy each run, an int makes the series reproducible
    'seed': None,
    # 0 -- silent, 1 -- header and summary table, 2 -- trace every game
    'verbose': 1,
}

if __name__ == "__main__":
    simulator = GameSeries(config)
    simulator.header()
    simulator.simulate()
    simulator.pstats()

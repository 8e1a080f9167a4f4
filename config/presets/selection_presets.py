"""Predefined selection operator configurations."""

# Elite preset - carry over the single best chromosome
ELITE_PRESET = {'type': 'elite', 'params': {'num_elite': 1}}

# Elitist pair preset - carry over the two best chromosomes
ELITIST_PAIR_PRESET = {'type': 'elite', 'params': {'num_elite': 2}}

# Truncation preset - breed from the four best chromosomes only
TRUNCATION_PRESET = {'type': 'truncation', 'params': {'subset_size': 4}}

# Roulette preset - fitness proportional, strong selection pressure
ROULETTE_PRESET = {'type': 'weighted_roulette', 'params': {}}

# Rank preset - rank proportional, milder selection pressure
RANK_PRESET = {'type': 'rank', 'params': {}}

SELECTION_PRESETS = {
    'elite': ELITE_PRESET,
    'elitist_pair': ELITIST_PAIR_PRESET,
    'truncation': TRUNCATION_PRESET,
    'roulette': ROULETTE_PRESET,
    'rank': RANK_PRESET,
}

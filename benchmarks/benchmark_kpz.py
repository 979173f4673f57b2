"""
Based on:
    https://github.com/Erotemic/misc/blob/main/tests/python/bench_template.py

Requirements:
    pip install kpz[bench]
"""


def random_expression(size, rng):
    """
    Build an expression with ``size`` operands, nested in parentheses now and
    then so every level of the grammar gets used.
    """
    operators = ['+', '-', '*', '/', '%']
    parts = []
    depth = 0
    for idx in range(size):
        if rng.random() < 0.2:
            parts.append('(')
            depth += 1
        parts.append(rng.choice(['x', 'x', str(rng.randint(1, 99)), 'x^2']))
        if depth and rng.random() < 0.3:
            parts.append(')')
            depth -= 1
        if idx < size - 1:
            parts.append(rng.choice(operators))
    parts.append(')' * depth)
    return ' '.join(parts)


def benchmark():
    import random
    import ubelt as ub
    import pandas as pd
    import timerit
    import numpy as np
    import kpz

    errors = []
    engine = kpz.ExpressionParser(on_error=errors.append)
    engine.evaluate('x = 2')
    modes = {
        'evaluate': engine.evaluate,
        'differentiate': engine.differentiate,
        'integrate': engine.integrate,
    }

    ti = timerit.Timerit(100, bestof=10, verbose=1)
    basis = {
        'mode': list(modes),
        'size': np.linspace(4, 2048, 8).round().astype(int),
    }

    rng = random.Random(0)
    texts = {size: random_expression(size, rng) for size in basis['size']}

    rows = []
    for params in ub.named_product(basis):
        key = ub.repr2(params, compact=1, si=1)
        method = modes[params['mode']]
        text = texts[params['size']]
        for timer in ti.reset(key):
            with timer:
                method(text)
        # one row per best-of chunk so seaborn can show the variance
        for time in map(min, ub.chunks(ti.times, ti.bestof)):
            rows.append({'time': time, 'key': key, **params})

    if errors:
        print('Reported {} errors while timing'.format(len(errors)))

    data = pd.DataFrame(rows).sort_values('time')
    print(data)

    min_times = data.groupby('key')[['time']].min().rename({'time': 'min'}, axis=1)
    mean_times = data.groupby('key')[['time']].mean().rename({'time': 'mean'}, axis=1)
    stats_data = pd.concat([min_times, mean_times], axis=1).sort_values('min')
    print('Statistics:')
    print(stats_data)

    import seaborn as sns
    from matplotlib import pyplot as plt
    sns.set()
    ax = plt.figure().gca()
    sns.lineplot(data=data, x='size', y='time', hue='mode', marker='o', ax=ax)
    ax.set_title('Evaluate / differentiate / integrate')
    ax.set_xlabel('Operands')
    ax.set_ylabel('Time (seconds)')
    plt.show()


if __name__ == '__main__':
    """
    CommandLine:
        python benchmarks/benchmark_kpz.py
    """
    benchmark()

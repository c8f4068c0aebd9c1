# utils/plotting.py
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt


def bar_dict(d: dict, title: str, xlabel: str, ylabel: str, path: str = ""):
    xs = list(d.keys())
    ys = list(d.values())
    fig = plt.figure()
    plt.bar([str(x) for x in xs], ys)
    plt.title(title)
    plt.xlabel(xlabel); plt.ylabel(ylabel)
    plt.tight_layout()
    if path:
        fig.savefig(path)
        plt.close(fig)
    return fig

# eternakit

Scoring strategies for RNA secondary-structure designs, together with
the typed option system, command-line parsing, logging helpers, string
and file helpers, and a small graph library that they sit beside.

## Installation

```
pip install .
```

To run the test suite, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Describing a design

Strategies score a `Features` object from `eternakit.features`. It holds:

- `length` and the nucleotide counts `a_count`, `c_count`, `g_count`,
  `u_count`, which `count_sequence(sequence)` fills from a sequence;
- the pair counts `gc`, `ua`, `gu` and the `pairmap` (position to
  partner), which `count_basepairs(basepairs)` fills from `BasePair`
  objects (a pair's positions go into the pair map only when both `i`
  and `j` are given);
- `helices`, a list of `Helix` objects, each a tuple of stacked
  `BasePair`s;
- `multi_loops`, a list of `MultiLoop` objects, each a tuple of closing
  `BasePair`s in `ends`;
- the folding data: `fe` (free energy, default 0), `meltpoint`
  (default 97), `structure`, and `dotplot`, a list of
  `PairProbability(i, j, p)`.

`BasePair` has `is_gc()`, `is_au()`, `is_gu()` and `bp_type()`, which
returns the two residue letters in order, such as `"GC"` or `"CG"`.

## Scoring a design

Every strategy is a subclass of `eternakit.strategy.Strategy` with a
`name`, `mean`, `stdev`, `params` and a `score(features)` method; a
higher score is better.

```python
from eternakit.features import BasePair, Features, Helix
from eternakit.strategies import ABasicTest, CleanPlotStackCapsandSafeGC

pairs = [BasePair("G", "C", 1, 12), BasePair("G", "C", 2, 11), BasePair("A", "U", 3, 10)]

features = Features(fe=-6.0, meltpoint=80)
features.count_sequence("GGAAAAAAAUCC")
features.count_basepairs(pairs)
features.helices = [Helix(tuple(pairs))]

print(ABasicTest().score(features))
print(CleanPlotStackCapsandSafeGC().score(features))
```

The strategies are:

- `eternakit.strategies`: `ABasicTest`, `BerexTest`,
  `CleanPlotStackCapsandSafeGC`, `DirectionofGCPairsinMultiLoops`,
  `NumofYellowNucleotidesperLengthofString`.
- `eternakit.modified_strategies`: `ModifiedABasicTest`,
  `ModifiedBerexTest`, `ModifiedCleanPlotStackCapsandSafeGC`,
  `ModifiedDirectionofGCPairsinMultiLoops` (always 100) and
  `ModifiedNumofYellowNucleotidesperLengthofString`.

`eternakit.strategy` also provides two helpers shared by the plot
strategies: `cap_score(helices)`, the mean over helices of how well
their ends are capped by GC pairs, and `plot_penalty(features,
threshold)`, the total probability of dot-plot entries at or above
`threshold` that are not in the pair map.

## What the package does not do

- It does not fold sequences. Free energy, melting point, predicted
  structure and the pair-probability dot plot must be computed
  elsewhere and put into `Features` by the caller.
- It does not build `Features` from a dot-bracket structure; helices,
  multiloops and base pairs are supplied by the caller.
- It has no combined, weighted scorer, no lookup of strategies by name,
  and no sequence designer. Combining strategy scores is left to the
  caller.
- It installs no command-line programs.

## Options and command lines

`eternakit.option.Options` is an ordered collection of named, typed
`Option`s. `OptionType` is one of `BOOL`, `INT`, `STRING` or `FLOAT`.
Reading or writing an option with the wrong type raises `OptionError`;
ints and floats convert into each other. `lock_option_adding()` stops
new options from being added.

`eternakit.cl_option.CommandLineOptions` reads arguments of the form
`-name value`; a `BOOL` option is switched on by `-name` alone. Unknown
names, values that cannot be converted and missing required options
raise `CommandLineOptionError`.

`eternakit.command_line_parser.assign_options(cl_options, options,
prefix="")` copies parsed values into an `Options` collection, removing
a leading `prefix.` from names when a prefix is given.

`eternakit.application.Application` is an abstract base class for
command-line tools. A subclass declares options with `add_option` in
`setup_options`, reads them with `parse_command_line(argv)` (default
`sys.argv[1:]`) and the `get_*_option` methods, and does its work in
`run`.

```python
from eternakit.application import Application
from eternakit.option import OptionType

class Greet(Application):
    def setup_options(self):
        self.add_option("name", "world", OptionType.STRING)
        self.add_option("loud", False, OptionType.BOOL)

    def run(self):
        text = f"hello {self.get_string_option('name')}"
        print(text.upper() if self.get_bool_option("loud") else text)

app = Greet()
app.setup_options()
app.parse_command_line(["-name", "rna", "-loud"])
app.run()
```

## Logging, text and files

- `eternakit.log`: `LogLevel`, `log_level_from_str(s)` (case-insensitive;
  raises `ValueError` for unknown names), and `init_logging(log_level)`,
  which sets up the `eternakit` logger to print to standard output as
  `HH:MM:SS LEVEL [function@line] message` using `CustomFormatter`.
- `eternakit.text`: `split_str_by_delimiter`, `join_by_delimiter`,
  `filename`, `base_dir`, `is_number`, `ltrim`, `rtrim`, `trim`.
- `eternakit.file_io`: `file_exists`, `is_dir`, and
  `get_lines_from_file`, which raises `FileNotFoundError` for a missing
  file.

## Graphs

`eternakit.graph` provides two graph classes built on the nodes and
connections of `eternakit.graph_node`:

- `GraphDynamic`, whose nodes take any number of connections.
- `GraphStatic`, whose nodes have a fixed number of connection slots;
  it can also `copy()`, `remove_node(index)` and `remove_level(level)`.

`add_data` adds a node joined to the last node added (or to
`parent_index`) and returns its index. Iterating over a graph starts at
the first node with fewer than two connections and always visits the
lowest-index node of the frontier next; `transverse(node)` walks only
what can be reached from `node`. Misuse raises `GraphError`.
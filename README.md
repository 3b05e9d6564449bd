# osdrills

Small command-line tools around operating-system and networking basics
(processes, sockets, signals) and a few classic algorithms. The package
uses only the standard library.

## Installation

    pip install .

Add the `test` extra to run the test suite:

    pip install ".[test]"
    pytest

## Commands

### Poisson probability

    osdrills-poisson <lambda> <k>

Prints `P_X(k) = ...` with ten decimals for a Poisson distribution with
rate `lambda`. `k` must be an integer; with a wrong number of arguments
or a bad value it prints a message and exits with status 1.

Library: `osdrills.poisson.poisson(k, lam)`, `factorial(n)`, and
`format_table()`, which returns a fixed table of sample values.

### Maximum subarray sum

    osdrills-maxsubarray <seed> <n>

Generates `n` pseudo-random integers between -25 and 74 from `seed` and
prints the largest sum of any contiguous run. The empty run counts, so the
result is never negative. `osdrills.maxsubarray` offers three versions of
the algorithm, `max_sub_array_linear`, `max_sub_array_quadratic` and
`max_sub_array_cubic`, plus `generate_random_array(seed, n)`.

### Dijkstra shortest paths

    osdrills-dijkstra < graph.txt

Reads from standard input the number of vertices `V`, then a `V x V`
adjacency matrix with each row ending at a line break, then the source
vertex:

    3
    0 4 1
    4 0 2
    1 2 0
    0

Weights must be non-negative and the diagonal must be zero. A zero weight
off the diagonal means there is no edge. The command prints each vertex
with its distance from the source. Unreachable vertices show
2147483647. Bad input prints an error message and exits with status 1.
In the library, `parse_input(text)` raises `GraphInputError`, and
`dijkstra(graph, src)` returns the list of distances.

### Phonebook

    osdrills-add2pb Jane Doe, 12 34
    osdrills-findphone Jane

`osdrills-add2pb` appends its arguments, joined by spaces, as one line to
`phonebook.txt` in the current directory. The file must already exist.
`osdrills-findphone` prints one result for each line of that file that
contains the name. The result is the field between the first and second
comma, or the whole line if there is no comma, with all spaces removed.
In the example above it prints `1234`.

### Tic-tac-toe

    osdrills-ttt 519283746

The argument must use each digit 1–9 exactly once. The computer plays `X`
and moves first. It takes the first cell in the given order that is still
free. You play `O` by entering a cell number from 1 to 9, with cells
numbered row by row. If input ends or is not a number, the game stops and
exits with status 1. The game logic is in `osdrills.tictactoe` (`Board`,
`play`, `validate_input`).

### Running a program

    osdrills-mync -e "osdrills-ttt 123456789"

Runs the given command line. The words are split on spaces.

### Socket relay

    osdrills-netcat [-e <command>] [-b <spec>] [-i <spec>] [-o <spec>] [-t <seconds>]

With `-e`, it runs the command with its standard input taken from the
`-i` socket and its standard output sent to the `-o` socket. `-b` uses
one endpoint for both input and output, and cannot be combined with `-i`
or `-o`. Without `-e`, it copies data from the input socket to the
terminal and from the terminal to the output socket. It stops when either
side ends. `-t` ends the program after the given number of seconds.

Endpoint specifications (parsed by `osdrills.endpoints.parse_spec`):

| Spec                          | Meaning                                      |
|-------------------------------|----------------------------------------------|
| `TCPS<port>`                  | TCP server on all interfaces, accepts one connection |
| `TCPC<host>,<port>`           | TCP client                                   |
| `UDPS<port>`                  | UDP server, answers the first sender         |
| `UDPC<host>,<port>`           | UDP client, sends `Conn msg` to announce itself |
| `UDSSS<path>` / `UDSSD<path>` | Unix socket server, stream / datagram        |
| `UDSCS<path>` / `UDSCD<path>` | Unix socket client, stream / datagram        |

Example: serve tic-tac-toe on TCP port 4050, then play it from another
terminal.

    osdrills-netcat -e "osdrills-ttt 123456789" -b TCPS4050
    osdrills-netcat -b TCPClocalhost,4050

## Limitations

- Commands given with `-e` are not run through a shell. Quoting, pipes
  and redirections are not understood, and words are split on single
  spaces only.
- TCP and UDP servers listen on IPv4 only and serve a single peer.
- The Unix datagram server does not send replies back to its client.
- The relay and the alarm behind `-t` need a POSIX system.
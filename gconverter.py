from graph import Graph

def convert(infile_name: str, outfile_name: str, fmt: str='named', infmt: str='auto') -> Graph:
    g = Graph.from_file(infile_name, infmt)
    g.write(outfile_name, fmt)
    return g

if __name__ == '__main__':
    import argparse
    import sys

    from mst_errors import GraphFormatError

    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('-t', '--to', default='named', choices=['named', 'indexed'])
    parser.add_argument('--from', dest='infmt', default='auto', choices=['auto', 'named', 'indexed'])

    args = parser.parse_args()

    try:
        convert(args.infile, args.outfile, args.to, args.infmt)
    except GraphFormatError as e:
        print(f'{args.infile}: {e}', file=sys.stderr)
        sys.exit(1)

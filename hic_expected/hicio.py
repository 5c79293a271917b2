import gzip
import os

import pandas as pd

def divide_name(filename):
    #home-made os.path.splitext, for it can't handle "name.a.b.c" properly
    basename = os.path.basename(filename)
    parts = basename.split(".") #split return >= 1 length list
    if len(parts) == 1:
        return parts[0], ""
    else:
        return parts[0], "."+".".join(parts[1:])
def _opener(filename):
    # compatible for zipped file
    return gzip.open if str(filename).endswith(".gz") else open
def parse_pairs(filename:str)->pd.DataFrame:
    '''
    read from 4DN's standard .pairs format
    compatible with all hickit originated pairs-like format
    chromsizes in header are kept in attrs["chromosomes"], attrs["lengths"]
    '''
    # read comments
    columns = None
    with _opener(filename)(filename,"rt") as f:
        comments = []
        chromosomes = []
        lengths = []
        for line in f:
            if line[0] != "#":
                break
            if line.startswith("#chromosome") or line.startswith("#chromsize"):
                chrom, length = line.split(":")[1].strip().split()
                chromosomes.append(chrom)
                lengths.append(int(length))
            if line.startswith("#columns:"):
                columns = line.split(":")[1].strip().split()
            ## comment lines are stored in dataframe.attrs["comment"]
            comments.append(line)
    if columns is None:
        raise ValueError(f"{filename}: no #columns: header line, not a .pairs file")
    dtype_array = {"readID":"str",
            "chr1":"str",
            "pos1":"int64",
            "chr2":"str",
            "pos2":"int64",
            "strand1":pd.CategoricalDtype(categories=["+","-"]),
            "strand2":pd.CategoricalDtype(categories=["+","-"])}
    dtypes = {key:value for key, value in dtype_array.items() if key in columns}
    #read table format data
    pairs = pd.read_table(
        filename,
        header=None,
        comment="#",
        dtype=dtypes,
        names=columns
        )
    pairs.attrs["comments"] = comments
    pairs.attrs["name"], _ = divide_name(filename) # infer real sample name
    pairs.attrs["chromosomes"] = chromosomes
    pairs.attrs["lengths"] = lengths
    return pairs

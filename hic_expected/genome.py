from collections import namedtuple

import pandas as pd

Chromosome = namedtuple("Chromosome", "index name length")

ALL_BY_ALL = "All"

def chromosomes(chromsizes):
    """
    Get chromosome lengths.
    Input:
        chromsizes: chromosome length table; string(file path), dict or pd.DataFrame
            file: tab separated, no header, chrom<TAB>length
            DataFrame: indexed by chrom, first column is length
            dict: {chrom : length}
    Return:
        pandas.DataFrame, index "chrom", column "length"
    """
    if isinstance(chromsizes, pd.DataFrame):
        data = chromsizes.iloc[:, [0]].copy()
        data.columns = ["length"]
        data.index.name = "chrom"
    elif isinstance(chromsizes, dict):
        data = pd.DataFrame(
            {"length" : list(chromsizes.values())},
            index = pd.Index(list(chromsizes.keys()), name="chrom")
        )
    else:
        try:
            data = pd.read_table(
                chromsizes,
                index_col=0,
                names=["chrom", "length"],
                comment="#"
                ) # input is a file path
        except FileNotFoundError:
            raise ValueError("chromsizes: not a valid chromosome length file")
    data["length"] = data["length"].astype("int64")
    return data
class ChromosomeHandler:
    """
    Ordered chromosome set of a genome, looked up by index or by name.
    The "All" pseudo chromosome stands for the whole genome and is skipped
    by per-chromosome calculations.
    """
    def __init__(self, chromosome_list):
        """
        Input:
            chromosome_list: list of Chromosome; indexes must be unique
        """
        self.chromosomes = list(chromosome_list)
        indexes = [chrom.index for chrom in self.chromosomes]
        assert len(set(indexes)) == len(indexes), "Chromosome indexes must be unique."
        self._by_name = {chrom.name : chrom for chrom in self.chromosomes}
        self._by_index = {chrom.index : chrom for chrom in self.chromosomes}
    @classmethod
    def from_chromsizes(cls, chromsizes, all_by_all=True):
        """
        Build handler from a chromosome length table.
        Input:
            chromsizes: see chromosomes()
            all_by_all: if True, put the "All" pseudo chromosome at index 0
                and number real chromosomes from 1
        Output:
            ChromosomeHandler
        """
        data = chromosomes(chromsizes)
        chrom_list = []
        offset = 0
        if all_by_all:
            # whole genome in kb, so it fits the same integer range as real chromosomes
            chrom_list.append(Chromosome(0, ALL_BY_ALL, int(data["length"].sum() // 1000)))
            offset = 1
        for i, (name, length) in enumerate(data["length"].items()):
            chrom_list.append(Chromosome(i + offset, str(name), int(length)))
        return cls(chrom_list)
    @staticmethod
    def is_all_by_all(chromosome):
        return chromosome.name.lower() == ALL_BY_ALL.lower()
    def get_max_chrom_index(self):
        return max((chrom.index for chrom in self.chromosomes), default=-1)
    def get_chromosome_array_without_all_by_all(self):
        return [chrom for chrom in self.chromosomes if not self.is_all_by_all(chrom)]
    def get_chromosome_from_name(self, name):
        """
        Input:
            name: chromosome name, like "chr1"
        Output:
            Chromosome
        Raises KeyError for names not in the genome.
        """
        return self._by_name[name]
    def get_chromosome_from_index(self, index):
        return self._by_index[index]
    def __len__(self):
        return len(self.chromosomes)
    def __iter__(self):
        return iter(self.chromosomes)

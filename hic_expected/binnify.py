# transform pairs table to contact counts between binned coordinates
# pos-pos -> bin-bin / point -> pixel
import logging

import pandas as pd

logger = logging.getLogger(__name__)

def bin_pairs(pairs, chromosome_handler, binsize:int):
    """
    Count intra-chromosomal contacts per pixel.
    Input:
        pairs: pd.DataFrame with at least chr1, pos1, chr2, pos2
        chromosome_handler: ChromosomeHandler; pairs on chromosomes not in
            it, or with a position outside [0, length], are dropped
        binsize: int
    Output:
        pd.DataFrame with columns chrom_idx, bin1, bin2, count
    """
    binsize = int(binsize)
    chroms = chromosome_handler.get_chromosome_array_without_all_by_all()
    name2idx = {chrom.name : chrom.index for chrom in chroms}
    name2len = {chrom.name : chrom.length for chrom in chroms}
    intra = pairs.loc[pairs["chr1"].astype(str) == pairs["chr2"].astype(str)]
    chrom_names = intra["chr1"].astype(str)
    chrom_idx = chrom_names.map(name2idx)
    known = chrom_idx.notna()
    intra = intra.loc[known]
    chrom_len = chrom_names.loc[intra.index].map(name2len).astype("int64")
    pos1 = intra["pos1"].astype("int64")
    pos2 = intra["pos2"].astype("int64")
    inside = (pos1 >= 0) & (pos1 <= chrom_len) & (pos2 >= 0) & (pos2 <= chrom_len)
    n_outside = int((~inside).sum())
    if n_outside > 0:
        logger.warning("%d pairs outside chromosome lengths dropped", n_outside)
    intra = intra.loc[inside]
    contacts = pd.DataFrame(
        {
            "chrom_idx" : chrom_idx.loc[intra.index].astype("int64"),
            "bin1" : pos1.loc[intra.index] // binsize,
            "bin2" : pos2.loc[intra.index] // binsize
        }
    )
    contacts = contacts.groupby(["chrom_idx", "bin1", "bin2"]).size().rename("count").reset_index()
    contacts["count"] = contacts["count"].astype("float64")
    return contacts

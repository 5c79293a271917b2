import concurrent.futures
from functools import wraps

from tqdm import tqdm

def mt(func):
    """
    Run func on every item of an iterable in a thread pool.
    e.g: mt(func)(chunks, calc, num_workers=4)
    Threads, not processes: workers share the accumulator passed in.
    """
    @wraps(func)
    def wrapper(iterable, *args, num_workers=4, progress=True, **kwargs):
        items = list(iterable)
        with concurrent.futures.ThreadPoolExecutor(max_workers=num_workers) as executor:
            futures = [executor.submit(func, item, *args, **kwargs) for item in items]
            results = []
            for future in tqdm(concurrent.futures.as_completed(futures), total=len(futures), disable=not progress):
                results.append(future.result())
            return results
    return wrapper
def _add_chunk(chunk, calc):
    """
    Feed one chunk of binned contacts into calc.
    Output:
        number of rows fed
    """
    for chrom_idx, bin1, bin2, count in chunk[["chrom_idx", "bin1", "bin2", "count"]].itertuples(index=False):
        calc.add_distance(chrom_idx, bin1, bin2, count)
    return len(chunk)
def add_contacts(calc, contacts, num_workers=4, chunksize=100000, progress=True):
    """
    Feed a binned contact table into an ExpectedValueCalculation in parallel.
    Returns after every chunk is in, so compute_density can follow directly.
    Input:
        calc: ExpectedValueCalculation
        contacts: pd.DataFrame with columns chrom_idx, bin1, bin2, count
        num_workers: number of threads
        chunksize: rows per task
        progress: show tqdm progress bar
    Output:
        number of rows fed
    """
    chunks = (contacts.iloc[i:i + chunksize] for i in range(0, len(contacts), chunksize))
    fed = mt(_add_chunk)(chunks, calc, num_workers=num_workers, progress=progress)
    return sum(fed)

"""Batch helpers for indexing fixed-size numeric values held in arrays."""
from __future__ import annotations

import chex
import jax
import jax.numpy as jnp
import numpy as np

INDEX_DTYPE = jnp.int32


def to_batch_array(values: chex.Array) -> chex.Array:
    """
    Convert `values` to a JAX array without changing any element.

    With 64-bit types disabled JAX narrows int64 and float64 input. The
    narrowing is accepted only when every element survives it unchanged;
    otherwise a ValueError is raised.
    """
    host = np.asarray(values)
    array = jnp.asarray(host)
    if array.dtype != host.dtype:
        restored = np.asarray(jax.device_get(array)).astype(host.dtype)
        equal_nan = bool(np.issubdtype(host.dtype, np.inexact))
        if not np.array_equal(restored, host, equal_nan=equal_nan):
            raise ValueError(
                f"Converting a {host.dtype} batch to {array.dtype} changes its values; "
                "enable jax_enable_x64 or pass values representable in 32 bits."
            )
    return array


def first_occurrence_groups(values: chex.Array) -> tuple[chex.Array, chex.Array]:
    """
    Group a 1-D batch by value, numbering the groups in first-occurrence order.

    Returns:
        A tuple containing:
            - positions of the first occurrence of every distinct value, in batch order.
            - for every batch element, the number of its group.
    """
    values = to_batch_array(values)
    _, unique_indices, inverse = jnp.unique(values, return_index=True, return_inverse=True)
    # jnp.unique numbers groups by sorted value; renumber them by first appearance
    order = jnp.argsort(unique_indices)
    rank = jnp.zeros_like(order).at[order].set(jnp.arange(order.shape[0], dtype=order.dtype))
    return unique_indices[order], rank[inverse.reshape(-1)]


def has_nan(values: chex.Array) -> bool:
    values = to_batch_array(values)
    if not jnp.issubdtype(values.dtype, jnp.inexact):
        return False
    return bool(jax.device_get(jnp.any(jnp.isnan(values))))


def representatives(values: chex.Array, positions: chex.Array) -> list:
    """Python scalars of `values` at `positions`, in order."""
    return jax.device_get(to_batch_array(values)[positions]).tolist()
